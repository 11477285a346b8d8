"""Domain contexts: the six broadcast realms and who lives in each."""

from eternal_stream.models import DomainContext

DOMAINS = (
    DomainContext(
        slug="earth",
        name="Earth",
        element="Earth",
        description="The familiar realm, where it all begins.",
        resident_ids=("willy", "stitch-up-girl", "boo-g", "xtreme", "boots",
                      "keith-man", "mr-kevin", "peter"),
        topics=("normalcy", "trade", "beginnings", "grounding"),
        atmosphere=("familiar", "grounded", "stable", "mundane"),
        lore_pool_ref="earth",
    ),
    DomainContext(
        slug="frost-reach",
        name="Frost Reach",
        element="Ice",
        description="Frozen wastes where cold things dwell.",
        resident_ids=("willy", "stitch-up-girl", "the-general-traveler", "boots", "jane"),
        topics=("cold", "endurance", "preservation", "patience", "survival"),
        atmosphere=("frozen", "still", "crystalline", "patient"),
        lore_pool_ref="frost-reach",
    ),
    DomainContext(
        slug="infernus",
        name="Infernus",
        element="Fire",
        description="The burning lands of eternal flame.",
        resident_ids=("dr-maxwell", "body-count", "alice"),
        topics=("fire", "transformation", "destruction", "rebirth"),
        atmosphere=("burning", "intense", "dangerous", "alive"),
        lore_pool_ref="infernus",
    ),
    DomainContext(
        slug="shadow-keep",
        name="Shadow Keep",
        element="Death",
        description="Where darkness takes physical form.",
        resident_ids=("mr-bones", "the-general-wanderer", "the-general-traveler",
                      "body-count", "john", "rhea"),
        topics=("death", "shadows", "endings", "combat", "strategy"),
        atmosphere=("dark", "heavy", "final", "ominous"),
        lore_pool_ref="shadow-keep",
    ),
    DomainContext(
        slug="null-providence",
        name="Null Providence",
        element="Void",
        description="The void between worlds.",
        resident_ids=("mr-bones", "dr-voss", "king-james", "clausen", "mr-kevin",
                      "the-one", "john"),
        topics=("void", "nothingness", "research", "royalty", "absolutes"),
        atmosphere=("empty", "vast", "absolute", "null"),
        lore_pool_ref="null-providence",
        volatility=0.01,
    ),
    DomainContext(
        slug="aberrant",
        name="Aberrant",
        element="Wind",
        description="Reality bends and breaks here.",
        resident_ids=("boo-g", "xtreme", "boots", "clausen", "robert"),
        topics=("chaos", "wind", "change", "unreality", "madness"),
        atmosphere=("chaotic", "shifting", "unpredictable", "wild"),
        lore_pool_ref="aberrant",
        volatility=0.01,
    ),
)
