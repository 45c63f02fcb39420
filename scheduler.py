import time
import schedule

from config.logging_config import log
from config.searches import build_search_definitions
from config.settings import Settings
from core.pipeline import ScrapingPipeline
from core.triage import TriageEngine
from database.sheets_client import SheetsClient
from scrapers.kijiji import KijijiScraper


def run_job(settings: Settings):
    log.info("Starting scraping job...")
    store = SheetsClient(settings)
    pipeline = ScrapingPipeline(
        scraper=KijijiScraper(settings),
        engine=TriageEngine(store, settings),
        searches=build_search_definitions(),
        settings=settings,
    )
    results = pipeline.run()
    log.info("Scraping job finished.")
    return results


def start_scheduler(settings: Settings):
    log.info(f"Scheduler started. Running every {settings.SCHEDULE_INTERVAL_HOURS} hours.")
    schedule.every(settings.SCHEDULE_INTERVAL_HOURS).hours.do(run_job, settings)
    run_job(settings)
    while True:
        schedule.run_pending()
        time.sleep(1)
