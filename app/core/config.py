import os


class Settings:
    WG_BIN = os.getenv("WG_BIN", "wg")
    WG_DUMP_TIMEOUT = int(os.getenv("WG_DUMP_TIMEOUT", "10"))
    # если задан - wg запускается внутри этого контейнера
    DOCKER_CONTAINER = os.getenv("DOCKER_CONTAINER", "")

    MAX_HANDSHAKE = int(os.getenv("MAX_HANDSHAKE", "900"))  # 15 минут
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_ME")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ACCESS_TTL = int(os.getenv("JWT_ACCESS_TTL", "900"))  # 15 минут
    JWT_REFRESH_TTL = int(os.getenv("JWT_REFRESH_TTL", "1209600"))  # 14 дней
    JWT_ISSUER = os.getenv("JWT_ISSUER", "wg-status")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "wg-status-clients")

    # логин и пароль для авторизации
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")


settings = Settings()
