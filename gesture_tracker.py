"""
Hand Gesture Tracker

Runs MediaPipe hand tracking on a webcam feed and classifies the primary
hand into a built-in or custom gesture every frame.
"""

import cv2

from gesture_recognition.hand_gestures import (
    NO_GESTURE,
    GestureRecognizer,
    create_custom_gesture,
    finger_state,
    timestamp,
)
from gesture_recognition.hand_tracks import GestureDisplay, HandTracker


CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480

INSTRUCTIONS = """
==================================================
Hand Gesture Tracker
==================================================

Built-in gestures: Open Hand, Closed Fist, Pointing, Victory Sign, Thumbs Up

Controls:
  's'       - Record current hand as a sample of --name
  'f'       - Define --name from the current finger states
  'd'       - Delete the most recent custom gesture
  '1'..'5'  - Enable/disable a built-in gesture
  'q' or ESC - Quit
"""


def run_gesture_tracker(camera_index: int = 0, gesture_name: str = "custom", mirror: bool = True) -> None:
    """Run the webcam gesture tracker."""
    print(INSTRUCTIONS)

    cap = cv2.VideoCapture(camera_index)
    if not cap.isOpened():
        raise RuntimeError(f"Cannot open camera {camera_index}")

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, CAMERA_WIDTH)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CAMERA_HEIGHT)

    recognizer = GestureRecognizer()
    last_label = NO_GESTURE

    try:
        with HandTracker() as tracker, GestureDisplay() as display:
            while True:
                ret, frame = cap.read()
                if not ret:
                    continue

                if mirror:
                    frame = cv2.flip(frame, 1)

                hands = tracker.detect(frame)
                primary = hands[0] if hands else None
                label = recognizer.recognize(primary)

                if label != last_label:
                    print(f"[{timestamp()}] Gesture: {label}")
                    last_label = label

                display.render(frame, hands, label, tracker.detection_confidence, recognizer.gestures)
                key = display.show(frame)

                if key in (ord("q"), 27):
                    break
                if key == ord("s") and primary is not None:
                    recognizer.capture_sample(gesture_name, primary)
                elif key == ord("f") and primary is not None:
                    recognizer.add_custom_gesture(
                        create_custom_gesture(gesture_name, target_finger_state=finger_state(primary))
                    )
                elif key == ord("d") and recognizer.gestures.custom_gestures:
                    recognizer.remove_custom_gesture(recognizer.gestures.custom_gestures[-1].id)
                elif ord("1") <= key <= ord("5"):
                    built_ins = recognizer.gestures.built_in_gestures
                    recognizer.toggle_built_in_gesture(built_ins[key - ord("1")].id)
    finally:
        cap.release()
        cv2.destroyAllWindows()


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Hand Gesture Tracker")
    parser.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    parser.add_argument("-n", "--name", default="custom", help="Name for recorded custom gestures")
    parser.add_argument("--no-mirror", action="store_true", help="Do not mirror the camera image")
    args = parser.parse_args()

    run_gesture_tracker(camera_index=args.camera, gesture_name=args.name, mirror=not args.no_mirror)


if __name__ == "__main__":
    main()
