import argparse
import sys
from scheduler import start_scheduler, run_job
from config.logging_config import log, setup_logging
from config.settings import ConfigurationError, load_settings

def main():
    parser = argparse.ArgumentParser(description="Kijiji rental listings tracker")
    parser.add_argument("action", nargs="?", default="run", choices=["run", "schedule"], help="Run once (default) or on a schedule")

    args = parser.parse_args()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        log.critical(f"FATAL: {e}")
        sys.exit(1)
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if args.action == "run":
        run_job(settings)
    elif args.action == "schedule":
        start_scheduler(settings)

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log.info("Stopping...")
        sys.exit(0)
    except Exception as e:
        log.critical(f"Unhandled exception: {e}")
        sys.exit(1)
