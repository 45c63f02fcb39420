from typing import Dict, List
from core.models import SearchDefinition

REGIONS = ["west", "east"]
BEDROOM_COUNTS = [1, 2, 3]

URLS: Dict[str, str] = {
    "west_1_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/1+bedroom__bachelor+studio__1+bedroom+den/c37l1700273a27949001?sort=dateDesc&radius=5.0&address=Bloor+St+West+at+Symington+Ave%2C+Toronto%2C+ON+M6P+4H6%2C+Canada&ll=43.657391%2C-79.447578",
    "west_2_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/2+bedrooms__2+bedroom+den/c37l1700273a27949001?sort=dateDesc&radius=5.0&address=Bloor+St+West+at+Symington+Ave%2C+Toronto%2C+ON+M6P+4H6%2C+Canada&ll=43.657391%2C-79.447578",
    "west_3_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/3+bedrooms__3+bedroom+den__4+bedrooms__4+bedroom+den__5+bedrooms/c37l1700273a27949001?sort=dateDesc&radius=5.0&address=Bloor+St+West+at+Symington+Ave%2C+Toronto%2C+ON+M6P+4H6%2C+Canada&ll=43.657391%2C-79.447578",
    "east_1_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/1+bedroom__bachelor+studio__1+bedroom+den/c37l1700273a27949001?sort=dateDesc&radius=6.0&address=Danforth+Ave+at+Coxwell+Ave%2C+Toronto%2C+ON%2C+Canada&ll=43.6833855%2C-79.323606",
    "east_2_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/2+bedrooms__2+bedroom+den/c37l1700273a27949001?sort=dateDesc&radius=6.0&address=Danforth+Ave+at+Coxwell+Ave%2C+Toronto%2C+ON%2C+Canada&ll=43.6833855%2C-79.323606",
    "east_3_bedroom": "https://www.kijiji.ca/b-apartments-condos/city-of-toronto/3+bedrooms__3+bedroom+den__4+bedrooms__5+bedrooms__4+bedroom+den/c37l1700273a27949001?sort=dateDesc&radius=6.0&address=Danforth+Ave+at+Coxwell+Ave%2C+Toronto%2C+ON%2C+Canada&ll=43.6833855%2C-79.323606",
}


def dataset_name(region: str) -> str:
    return f"listings - {region} side"


def build_search_definitions() -> List[SearchDefinition]:
    """All bedroom counts for one region, then the next region."""
    searches = []
    for region in REGIONS:
        for beds in BEDROOM_COUNTS:
            key = f"{region}_{beds}_bedroom"
            searches.append(
                SearchDefinition(
                    region=region,
                    beds=beds,
                    url=URLS[key],
                    dataset=dataset_name(region),
                )
            )
    return searches
