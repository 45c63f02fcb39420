from scrapers.kijiji import KijijiScraper

__all__ = [
    "KijijiScraper",
]
