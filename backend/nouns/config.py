import os


def _env_flag(name, default):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Default turn length (seconds); clamped to 10..120 by the timer
    TURN_DURATION_SEC = int(os.environ.get('TURN_DURATION_SEC', '60'))
    SKIP_ENABLED = _env_flag('SKIP_ENABLED', 'true')
    # Turn timer resolution (sec). Kept configurable so demos can run fast.
    TIMER_TICK_SEC = float(os.environ.get('TIMER_TICK_SEC', '1'))
    # How many words "add sample words" pulls in by default
    SAMPLE_WORD_COUNT = int(os.environ.get('SAMPLE_WORD_COUNT', '5'))
    # Optional: debounce guess/skip taps (ms). 0 disables.
    CONTROLLER_DEBOUNCE_MS = int(os.environ.get('CONTROLLER_DEBOUNCE_MS', '0'))
    # Optional: heartbeat interval for timer worker logs (sec). 0 disables.
    TIMER_HEARTBEAT_SEC = int(os.environ.get('TIMER_HEARTBEAT_SEC', '0'))
