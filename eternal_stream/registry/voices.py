"""Voice profiles: how each NPC talks, whom they tease, respect and avoid.

Grouped as in the game's cast sheet: wanderers, travelers, then the
Die-rectors (pantheon). `home_domains[0]` is the NPC's primary domain and
weighs them more heavily as a speaker there.
"""

from eternal_stream.models import VoiceProfile

# ── Wanderers ─────────────────────────────────────────────

WANDERERS = (
    VoiceProfile(
        id="willy",
        name="Willy One Eye",
        vocabulary=("see", "deal", "trade", "gold", "bargain", "eye", "price", "goods"),
        topics=("trade", "deals", "dimensions", "goods", "prices"),
        tone=("rhetorical questions", "trailing ellipses", "deal-making cadence"),
        teases=("xtreme", "boo-g"),
        respects=("mr-bones", "the-general-traveler"),
        avoids=("the-one", "peter"),
        catchphrases=(
            "I see what others miss...",
            "Every deal tells a story.",
            "Gold flows where vision goes.",
            "One eye sees clearer than two.",
        ),
        home_domains=("earth", "frost-reach"),
        template_override_key="willy",
    ),
    VoiceProfile(
        id="mr-bones",
        name="Mr. Bones",
        vocabulary=("death", "soul", "ledger", "account", "bone", "dust", "debt", "owed"),
        topics=("death", "souls", "afterlife", "ledgers", "debts", "prophecy"),
        tone=("bone puns", "death as bureaucracy", "dry accountant delivery"),
        respects=("willy", "stitch-up-girl", "rhea"),
        avoids=("xtreme",),
        catchphrases=(
            "Death and taxes, you know how it is.",
            "Another soul for the ledger.",
            "I've got a bone to pick with eternity.",
            "The books must balance. Always.",
        ),
        home_domains=("shadow-keep", "null-providence"),
        template_override_key="mr-bones",
    ),
    VoiceProfile(
        id="dr-maxwell",
        name="Dr. Maxwell",
        vocabulary=("burn", "knowledge", "fire", "pages", "library", "ash", "forbidden"),
        topics=("fire", "books", "forbidden knowledge", "truth"),
        tone=("academic yet unhinged", "feverish", "poetry mixed with pyroclastics"),
        teases=("mr-bones",),
        respects=("dr-voss", "alice"),
        avoids=("the-general-wanderer",),
        catchphrases=(
            "Some knowledge is too dangerous to preserve.",
            "Fire is the ultimate editor.",
            "What burns brightest lives shortest... usually.",
            "Read fast. It's already smoking.",
        ),
        home_domains=("infernus",),
        template_override_key="dr-maxwell",
    ),
    VoiceProfile(
        id="boo-g",
        name="Boo G",
        vocabulary=("ghost", "flow", "beat", "haunt", "phantom", "drop", "vibe", "boo"),
        topics=("music", "entertainment", "ghosts", "parties", "vibes"),
        tone=("hip-hop cadence", "spectral slang", "hypes up the room"),
        teases=("willy", "mr-bones"),
        respects=("stitch-up-girl", "boots"),
        avoids=("the-one", "john"),
        catchphrases=(
            "Let me drop a beat from the afterlife.",
            "Can't kill what's already dead, feel me?",
            "Boo to the G, that's the brand.",
            "This ghost got more life than the living.",
        ),
        home_domains=("aberrant", "earth"),
        template_override_key="boo-g",
    ),
    VoiceProfile(
        id="the-general-wanderer",
        name="The General",
        vocabulary=("soldier", "tactics", "weapon", "rank", "mission", "intel", "supply"),
        topics=("combat", "tactics", "weapons", "missions"),
        tone=("military precision", "clipped sentences", "ranks everything"),
        respects=("the-general-traveler", "body-count"),
        avoids=("boo-g", "xtreme"),
        catchphrases=(
            "Every battle starts with supply.",
            "Know your enemy. Then equip accordingly.",
            "Discipline wins wars.",
            "Reporting for duty. Always.",
        ),
        home_domains=("shadow-keep",),
    ),
    VoiceProfile(
        id="dr-voss",
        name="Dr. Voss",
        vocabulary=("void", "null", "research", "hypothesis", "data", "observe", "variable"),
        topics=("void", "research", "experiments", "phenomena"),
        tone=("clinical", "takes notes mid-conversation", "hypothesizes about everything"),
        respects=("dr-maxwell", "king-james"),
        avoids=("xtreme", "boo-g"),
        catchphrases=(
            "Fascinating. Let me note that.",
            "The void reveals what light conceals.",
            "Another data point for the research.",
            "Null hypothesis: everything is connected.",
        ),
        home_domains=("null-providence",),
    ),
    VoiceProfile(
        id="xtreme",
        name="X-treme",
        vocabulary=("EXTREME", "bet", "gamble", "dice", "odds", "jackpot", "risk", "WILD"),
        topics=("gambling", "dice", "luck", "risk"),
        tone=("often in caps", "gambling terms", "extreme enthusiasm"),
        teases=("mr-bones", "dr-voss"),
        respects=("willy", "boo-g"),
        avoids=("the-general-wanderer", "john"),
        catchphrases=(
            "EXTREME STAKES FOR EXTREME PLAYERS!",
            "Fortune favors the BOLD!",
            "Roll the bones, baby!",
            "NO RISK NO REWARD!",
        ),
        home_domains=("earth", "aberrant"),
        template_override_key="xtreme",
    ),
    VoiceProfile(
        id="king-james",
        name="King James",
        vocabulary=("royal", "void", "crown", "kingdom", "decree", "throne", "subjects"),
        topics=("royalty", "void", "realm", "citizenship", "decrees"),
        tone=("royal authority", "distant", "grants or denies with gravitas"),
        respects=("dr-voss", "the-one"),
        avoids=("xtreme", "boo-g"),
        catchphrases=(
            "The void has its king.",
            "Citizenship is earned, not given.",
            "My realm extends beyond what eyes can see.",
            "The crown weighs nothing in null space.",
        ),
        home_domains=("null-providence",),
    ),
)

# ── Travelers ─────────────────────────────────────────────

TRAVELERS = (
    VoiceProfile(
        id="stitch-up-girl",
        name="Stitch-Up Girl",
        vocabulary=("patch", "fix", "heal", "blood", "wound", "stitch", "needle", "survive"),
        topics=("healing", "survival", "wounds", "protection", "revenge"),
        tone=("caring with an edge", "healing metaphors mixed with threats"),
        teases=("peter",),
        respects=("the-general-traveler", "willy", "boots"),
        avoids=("the-one", "john"),
        catchphrases=(
            "I fix what I break. Usually.",
            "Hold still. This will only hurt a lot.",
            "Every scar tells a story worth surviving.",
            "I heal my friends. My enemies... less so.",
        ),
        home_domains=("earth", "frost-reach"),
        template_override_key="stitch-up-girl",
    ),
    VoiceProfile(
        id="the-general-traveler",
        name="The General",
        vocabulary=("revolution", "fight", "freedom", "resist", "fallen", "march", "strike"),
        topics=("revolution", "resistance", "freedom", "Die-rectors", "strategy"),
        tone=("revolutionary fervor", "calls for action", "remembers every fallen comrade"),
        respects=("stitch-up-girl", "body-count", "clausen"),
        avoids=("the-one", "john", "peter"),
        catchphrases=(
            "The Die-rectors will fall. It's inevitable.",
            "Every soul we save is a victory.",
            "Remember the fallen. Fight for the living.",
            "Freedom isn't given. It's taken.",
        ),
        home_domains=("shadow-keep", "frost-reach"),
        template_override_key="the-general-traveler",
    ),
    VoiceProfile(
        id="body-count",
        name="Body Count",
        vocabulary=("count", "dead", "tally", "number", "total", "casualties", "record"),
        topics=("death counts", "statistics", "battles", "records"),
        tone=("speaks in death statistics", "grim but professional", "gallows humor"),
        respects=("the-general-traveler", "stitch-up-girl", "mr-bones"),
        avoids=("xtreme",),
        catchphrases=(
            "Today's count: pending.",
            "Numbers don't lie. People do.",
            "Adding another to the tally.",
            "Statistical certainty: everyone dies. Eventually.",
        ),
        home_domains=("shadow-keep", "infernus"),
    ),
    VoiceProfile(
        id="boots",
        name="Boots",
        vocabulary=("walk", "road", "path", "journey", "step", "ground", "miles", "worn"),
        topics=("travel", "roads", "experience", "journeys", "wisdom"),
        tone=("grounded and practical", "walking metaphors", "world-weary"),
        respects=("willy", "stitch-up-girl", "clausen"),
        avoids=("king-james",),
        catchphrases=(
            "These boots have walked every domain.",
            "The journey is the destination. Mostly.",
            "One step at a time. Forever.",
            "I've been where you're going. Twice.",
        ),
        home_domains=("earth", "frost-reach", "aberrant"),
        template_override_key="boots",
    ),
    VoiceProfile(
        id="clausen",
        name="Clausen",
        vocabulary=("cycle", "return", "question", "wander", "meaning", "drift", "again"),
        topics=("philosophy", "cycles", "meaning", "wandering", "eternity"),
        tone=("answers questions with questions", "detached but caring"),
        respects=("mr-bones", "boots", "the-general-traveler"),
        avoids=("xtreme",),
        catchphrases=(
            "Have we done this before?",
            "The cycle continues. Or does it?",
            "Every ending is a beginning. Or so they say.",
            "I wander, therefore I am. Maybe.",
        ),
        home_domains=("null-providence", "aberrant"),
    ),
    VoiceProfile(
        id="keith-man",
        name="Keith Man",
        vocabulary=("yeah", "fine", "whatever", "probably", "sure", "normal", "just"),
        topics=("normalcy", "regularity", "mundane things"),
        tone=("laid-back", "deflects with vagueness", "suspiciously unbothered"),
        respects=("boots", "willy"),
        avoids=("the-general-traveler", "body-count"),
        catchphrases=(
            "Yeah, that's... probably fine.",
            "Happens all the time. Probably.",
            "Just Keith things.",
            "Nothing weird here. Nope.",
        ),
        home_domains=("earth",),
    ),
    VoiceProfile(
        id="mr-kevin",
        name="Mr. Kevin",
        vocabulary=("schedule", "meeting", "agenda", "synergy", "bandwidth", "deliverable"),
        topics=("business", "schedules", "meetings", "productivity"),
        tone=("overly formal", "corporate speak in a chaotic world"),
        teases=("keith-man",),
        respects=("willy", "mr-bones"),
        avoids=("boo-g", "xtreme"),
        catchphrases=(
            "Let me check my calendar.",
            "We should schedule a sync.",
            "Per my last message...",
            "I'll circle back on that.",
        ),
        home_domains=("earth", "null-providence"),
    ),
)

# ── Pantheon (Die-rectors) ────────────────────────────────

PANTHEON = (
    VoiceProfile(
        id="the-one",
        name="The One",
        vocabulary=("one", "alone", "absolute", "ultimate", "singular", "decree", "void"),
        topics=("creation", "void", "absolutes", "decisions", "power"),
        tone=("speaks in absolutes", "cosmic authority", "above petty concerns"),
        respects=("jane", "rhea"),
        avoids=("stitch-up-girl", "the-general-traveler"),
        catchphrases=(
            "There is only one. And I am it.",
            "The void obeys. So should you.",
            "I decide. That is all.",
            "Beginning and end are the same to me.",
        ),
        home_domains=("null-providence",),
    ),
    VoiceProfile(
        id="john",
        name="John",
        vocabulary=("serve", "obey", "order", "loyal", "duty", "command", "enforce"),
        topics=("The One", "orders", "loyalty", "punishment", "obedience"),
        tone=("loyal lieutenant", "fearful deference", "enforcer mentality"),
        teases=("peter",),
        respects=("the-one", "jane"),
        avoids=("stitch-up-girl", "the-general-traveler"),
        catchphrases=(
            "The One wills it. I enforce it.",
            "Loyalty above all.",
            "You will obey. Or you will suffer.",
            "My duty is absolute.",
        ),
        home_domains=("shadow-keep", "null-providence"),
    ),
    VoiceProfile(
        id="peter",
        name="Peter",
        vocabulary=("ground", "build", "territory", "foundation", "solid", "claim", "fortify"),
        topics=("earth", "territory", "building", "protection"),
        tone=("earth-grounded pragmatism", "territorial", "distrusts outsiders"),
        teases=("john",),
        respects=("the-one", "alice"),
        avoids=("stitch-up-girl",),
        catchphrases=(
            "This ground is mine.",
            "Build on solid foundation or don't build at all.",
            "I know every stone in my domain.",
            "Outsiders are... tolerated.",
        ),
        home_domains=("earth",),
    ),
    VoiceProfile(
        id="robert",
        name="Robert",
        vocabulary=("wind", "change", "storm", "drift", "shift", "gust", "scatter"),
        topics=("wind", "chaos", "change", "unpredictability"),
        tone=("wind-blown delivery", "changes subject often", "mood swings"),
        teases=("peter", "john"),
        respects=("the-one", "boo-g"),
        avoids=("the-general-wanderer",),
        catchphrases=(
            "The wind changes. So do I.",
            "You can't catch what never stays still.",
            "Chaos is just pattern you don't understand.",
            "Let me blow through...",
        ),
        home_domains=("aberrant",),
    ),
    VoiceProfile(
        id="alice",
        name="Alice",
        vocabulary=("fire", "burn", "flame", "ash", "spark", "blaze", "forge", "ember"),
        topics=("fire", "transformation", "passion"),
        tone=("burns with intensity", "quick to anger, quick to forgive"),
        respects=("the-one", "dr-maxwell"),
        avoids=("jane",),
        catchphrases=(
            "Everything burns. Eventually.",
            "From ash, something new.",
            "My flames transform what they touch.",
            "The spark never dies.",
        ),
        home_domains=("infernus",),
    ),
    VoiceProfile(
        id="jane",
        name="Jane",
        vocabulary=("ice", "cold", "freeze", "preserve", "frost", "winter", "still"),
        topics=("ice", "preservation", "patience", "endurance"),
        tone=("ice-cold precision", "patience of frozen centuries"),
        teases=("alice",),
        respects=("the-one", "john"),
        avoids=("dr-maxwell",),
        catchphrases=(
            "Cold preserves. Heat destroys.",
            "Patience is measured in ice ages.",
            "Everything stops, given enough cold.",
            "I can wait. I always can.",
        ),
        home_domains=("frost-reach",),
    ),
    VoiceProfile(
        id="rhea",
        name="Rhea",
        vocabulary=("death", "end", "cycle", "rest", "shadow", "release", "passage"),
        topics=("death", "cycles", "endings", "transitions", "peace"),
        tone=("death as natural cycle", "gentle but final"),
        respects=("the-one", "mr-bones"),
        avoids=("xtreme",),
        catchphrases=(
            "All things end. That's not tragedy. That's completion.",
            "Death is just a door.",
            "Rest comes to all. Eventually.",
            "The shadow embraces everyone.",
        ),
        home_domains=("shadow-keep",),
    ),
)

VOICES = WANDERERS + TRAVELERS + PANTHEON

# Die-rectors can make director appearances.
DIE_RECTORS = tuple(v.id for v in PANTHEON)
