import logging

from config.settings import load_settings
from dashboard.ui import run_dashboard


def main():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_dashboard(settings)


if __name__ == "__main__":
    main()
