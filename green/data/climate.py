"""Winston, Oregon climate and growing-zone facts (USDA zones 8b/9a)."""
from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyClimate:
    month: int
    name: str
    avg_high_f: int
    avg_low_f: int
    precipitation_inches: float
    notes: str


LOCATION = "Winston, Oregon"
USDA_ZONE = "8b/9a"
CLIMATE_TYPE = "Warm-summer Mediterranean climate"
AVG_LAST_FROST = "Mid-April"
AVG_FIRST_FROST = "Mid-November"
GROWING_SEASON = "~200 days"

CHARACTERISTICS = [
    "Mild year-round temperatures",
    "Wet winters (November-March)",
    "Notably dry summers (June-September)",
    "Long growing season allowing multiple planting successions",
    "Pronounced summer drought requiring diligent irrigation",
    "Generally mild winters with occasional frost",
]

MONTHS: list[MonthlyClimate] = [
    MonthlyClimate(1, "January", 50, 34, 5.5, "Dormant season, plan garden, prepare soil when workable"),
    MonthlyClimate(2, "February", 54, 36, 4.8, "Start seeds indoors (tomatoes, peppers, onions), prune fruit trees"),
    MonthlyClimate(3, "March", 58, 38, 4.2, "Direct sow cool-season crops, plant potatoes, transplant onions"),
    MonthlyClimate(4, "April", 63, 40, 3.0, "Last frost typically mid-month, plant cool-season crops"),
    MonthlyClimate(5, "May", 70, 45, 2.0, "Plant warm-season crops, succession plant greens"),
    MonthlyClimate(6, "June", 76, 50, 1.2, "Irrigation becomes critical, mulch to conserve moisture"),
    MonthlyClimate(7, "July", 85, 53, 0.4, "Peak summer heat, consistent irrigation essential"),
    MonthlyClimate(8, "August", 85, 53, 0.5, "Plant fall crops, maintain irrigation, harvest peak"),
    MonthlyClimate(9, "September", 80, 48, 1.0, "Plant winter crops, cover crops, harvest continues"),
    MonthlyClimate(10, "October", 68, 42, 2.5, "First light frosts possible late month, harvest winter squash"),
    MonthlyClimate(11, "November", 55, 38, 5.8, "First hard frost typically mid-month, plant garlic"),
    MonthlyClimate(12, "December", 48, 34, 6.0, "Garden cleanup, plan for next season, compost"),
]
