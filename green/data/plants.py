"""
Plant Catalog for Winston, Oregon (USDA zones 8b/9a).

Static, read-only reference data. The task engine reads watering_needs and
days_to_maturity; everything else is served to the UI as-is.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PlantDefinition:
    id: str
    name: str
    variety: str
    watering_needs: str          # "low", "medium", "high"
    days_to_maturity: Optional[int] = None
    greenhouse_suitable: bool = False
    type: str = "Vegetable"      # "Vegetable", "Fruit", "Herb"
    sun_requirement: str = "Full Sun"
    hardiness_zones: tuple[str, ...] = ()
    planting_months: tuple[int, ...] = ()
    harvest_months: tuple[int, ...] = ()
    spacing_inches: Optional[float] = None
    depth_inches: Optional[float] = None
    companion_plants: tuple[str, ...] = ()
    avoid_plants: tuple[str, ...] = ()
    is_perennial: bool = False
    pest_info: Optional[str] = None
    how_to_guide: Optional[str] = field(default=None, repr=False)


PLANTS: list[PlantDefinition] = [
    PlantDefinition(
        id="spinach", name="Spinach", variety="Bloomsdale",
        watering_needs="medium", days_to_maturity=45, greenhouse_suitable=True,
        sun_requirement="Partial Sun",
        hardiness_zones=("3", "4", "5", "6", "7", "8", "9", "10"),
        planting_months=(1, 2, 3, 4, 9, 10, 11, 12),
        harvest_months=(3, 4, 5, 6, 10, 11, 12),
        spacing_inches=6, depth_inches=0.5,
        companion_plants=("strawberry", "pea", "cabbage", "cauliflower", "eggplant"),
        avoid_plants=("potato",),
        pest_info="Watch for aphids, leaf miners, and slugs. Spinach is susceptible to downy mildew in humid conditions.",
        how_to_guide="Plant seeds 1/2 inch deep, 2 inches apart, in rows 12-18 inches apart. Thin to 6 inches "
                     "apart when seedlings have 2 true leaves. Keep soil consistently moist.",
    ),
    PlantDefinition(
        id="kale", name="Kale", variety="Lacinato (Dinosaur)",
        watering_needs="medium", days_to_maturity=60, greenhouse_suitable=True,
        sun_requirement="Full Sun to Partial Shade",
        hardiness_zones=("3", "4", "5", "6", "7", "8", "9", "10"),
        planting_months=(1, 2, 3, 4, 9, 10, 11, 12),
        harvest_months=(3, 4, 5, 6, 10, 11, 12),
        spacing_inches=18, depth_inches=0.5,
        companion_plants=("beet", "celery", "cucumber", "onion", "potato", "spinach"),
        avoid_plants=("strawberry", "tomato"),
        pest_info="Susceptible to cabbage worms, aphids, and flea beetles. Row covers can help protect young plants.",
        how_to_guide="Plant seeds 1/4 to 1/2 inch deep, 3 inches apart. Thin to 18 inches apart. Harvest outer "
                     "leaves as needed, leaving the center to continue growing.",
    ),
    PlantDefinition(
        id="tomato", name="Tomato", variety="Cherokee Purple",
        watering_needs="high", days_to_maturity=80, greenhouse_suitable=True,
        hardiness_zones=("3", "4", "5", "6", "7", "8", "9", "10", "11"),
        planting_months=(3, 4, 5),
        harvest_months=(7, 8, 9, 10),
        spacing_inches=24, depth_inches=0.25,
        companion_plants=("basil", "carrot", "onion", "marigold"),
        avoid_plants=("potato", "cabbage", "fennel"),
        pest_info="Watch for tomato hornworms, aphids, and whiteflies. Susceptible to blight, especially in wet conditions.",
        how_to_guide="Start seeds indoors 6-8 weeks before last frost. Transplant after danger of frost has passed. "
                     "Plant deeply, burying 2/3 of the stem. Provide support with stakes or cages.",
    ),
    PlantDefinition(
        id="carrot", name="Carrot", variety="Nantes",
        watering_needs="medium", days_to_maturity=70, greenhouse_suitable=True,
        sun_requirement="Full Sun to Partial Shade",
        hardiness_zones=("3", "4", "5", "6", "7", "8", "9", "10"),
        planting_months=(3, 4, 5, 8, 9),
        harvest_months=(5, 6, 7, 10, 11, 12),
        spacing_inches=3, depth_inches=0.25,
        companion_plants=("bean", "lettuce", "onion", "pea", "rosemary", "sage", "tomato"),
        avoid_plants=("dill", "fennel"),
        pest_info="Carrot rust flies can be a problem. Carrot weevils and nematodes may also affect growth.",
        how_to_guide="Sow seeds directly in loose, well-draining soil free of rocks. Keep soil consistently moist "
                     "until germination. Thin to 3 inches apart when seedlings are 2 inches tall.",
    ),
    PlantDefinition(
        id="strawberry", name="Strawberry", variety="Seascape (Everbearing)",
        watering_needs="medium", days_to_maturity=120, greenhouse_suitable=True,
        type="Fruit",
        hardiness_zones=("4", "5", "6", "7", "8", "9"),
        planting_months=(1, 2, 3, 4, 9, 10),
        harvest_months=(5, 6, 7, 8, 9),
        spacing_inches=12, depth_inches=0,
        companion_plants=("bean", "borage", "lettuce", "spinach", "thyme"),
        avoid_plants=("cabbage", "broccoli", "fennel"),
        is_perennial=True,
        pest_info="Slugs and birds are common pests. May be susceptible to powdery mildew and leaf spot.",
        how_to_guide="Plant with crown at soil level. Space 12-18 inches apart. Remove runners to encourage larger "
                     "berries. Mulch around plants to keep berries clean and prevent weeds.",
    ),
    PlantDefinition(
        id="blueberry", name="Blueberry", variety="Sunshine Blue (Low-chill)",
        watering_needs="medium", days_to_maturity=730, greenhouse_suitable=True,
        type="Fruit",
        hardiness_zones=("5", "6", "7", "8", "9", "10"),
        planting_months=(1, 2, 3, 10, 11, 12),
        harvest_months=(6, 7, 8),
        spacing_inches=36, depth_inches=0,
        companion_plants=("strawberry", "thyme", "basil"),
        avoid_plants=("tomato", "eggplant"),
        is_perennial=True,
        pest_info="Birds are the main pest. May be affected by mummy berry disease in wet conditions.",
        how_to_guide="Plant in acidic soil (pH 4.5-5.5). Plant at same depth as nursery container. Water deeply "
                     "but infrequently. Mulch with pine needles or acidic compost.",
    ),
    PlantDefinition(
        id="basil", name="Basil", variety="Genovese",
        watering_needs="medium", days_to_maturity=30, greenhouse_suitable=True,
        type="Herb",
        hardiness_zones=("4", "5", "6", "7", "8", "9", "10", "11"),
        planting_months=(4, 5, 6),
        harvest_months=(6, 7, 8, 9, 10),
        spacing_inches=12, depth_inches=0.25,
        companion_plants=("tomato", "pepper", "oregano", "marigold"),
        avoid_plants=("rue",),
        pest_info="Japanese beetles and aphids can be problems. Susceptible to downy mildew in humid conditions.",
        how_to_guide="Start seeds indoors 6 weeks before last frost or direct sow after danger of frost. Pinch off "
                     "flower buds to encourage leaf production.",
    ),
    PlantDefinition(
        id="rosemary", name="Rosemary", variety="Arp (Cold Hardy)",
        watering_needs="low", days_to_maturity=90, greenhouse_suitable=True,
        type="Herb",
        hardiness_zones=("6", "7", "8", "9", "10", "11"),
        planting_months=(4, 5, 9, 10),
        harvest_months=(5, 6, 7, 8, 9, 10, 11, 12),
        spacing_inches=24, depth_inches=0,
        companion_plants=("bean", "broccoli", "cabbage", "carrot", "sage"),
        avoid_plants=("cucumber",),
        is_perennial=True,
        pest_info="Generally pest-resistant. May occasionally be affected by powdery mildew or spider mites.",
        how_to_guide="Plant in well-draining soil. Do not overwater; allow soil to dry between waterings. "
                     "Prune after flowering to maintain shape.",
    ),
    PlantDefinition(
        id="meyer-lemon", name="Meyer Lemon", variety="Improved Meyer",
        watering_needs="medium", days_to_maturity=365, greenhouse_suitable=True,
        type="Fruit",
        hardiness_zones=("8", "9", "10", "11"),
        planting_months=(3, 4, 5, 9, 10),
        harvest_months=(11, 12, 1, 2, 3),
        spacing_inches=36, depth_inches=0,
        companion_plants=("marigold", "nasturtium", "basil"),
        is_perennial=True,
        pest_info="Watch for scale insects, spider mites, and aphids. May be susceptible to citrus leaf miner.",
        how_to_guide="Grow in containers for the Winston climate. Water when top inch of soil is dry. "
                     "Bring indoors when temperatures drop below 50°F.",
    ),
    PlantDefinition(
        id="pea", name="Pea", variety="Sugar Snap",
        watering_needs="medium", days_to_maturity=60, greenhouse_suitable=True,
        sun_requirement="Full Sun to Partial Shade",
        hardiness_zones=("3", "4", "5", "6", "7", "8", "9", "10", "11"),
        planting_months=(2, 3, 4, 9, 10),
        harvest_months=(4, 5, 6, 11, 12),
        spacing_inches=3, depth_inches=1,
        companion_plants=("carrot", "cucumber", "radish", "spinach"),
        avoid_plants=("garlic", "onion"),
        pest_info="Aphids can be a problem. Powdery mildew may occur in humid conditions.",
        how_to_guide="Direct sow as soon as soil can be worked in spring. Provide support for climbing varieties. "
                     "Plant in succession every 2-3 weeks for continuous harvest.",
    ),
]
