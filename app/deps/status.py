from app.services.status.timer import SystemTimer, Timer


def get_timer() -> Timer:
    return SystemTimer()
