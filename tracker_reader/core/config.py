from shared.config import BaseServiceConfig
from shared.constants import TrackerKeys


class Settings(BaseServiceConfig):
    # Tracker key scope
    tracker_namespace: str = TrackerKeys.DEFAULT_NAMESPACE
    tracker_app_id: str = ""

    otel_service_name: str = "tracker-reader"


settings = Settings()
