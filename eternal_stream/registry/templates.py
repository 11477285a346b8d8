"""Entry templates and the word pools their placeholders draw from.

Placeholders use `{{NAME}}` syntax. Resolved kinds (each consumes RNG):

    NPC_NAME      another cast member; also becomes the entry's mention
    LORE_FACT     a domain fact (public/common lore) or a generic fact
    REACTION      reaction phrase bucketed by relationship to NPC_NAME
    OPINION       opinion phrase bucketed the same way
    INTENSITY     intensity adjective
    TIME_UNIT     vague span of time
    SHARED_EVENT  something two NPCs lived through

Context fields (fixed per entry, no RNG at fill time): DOMAIN, ELEMENT,
SEED, SEED_DAY, SPEAKER, CATCHPHRASE, ATMOSPHERE, TOPIC, FLAW, BEHAVIOR,
KNOWLEDGE, DIRECTOR_FACT, ORIGIN_FACT.
"""

from eternal_stream.models import StreamTemplate


def _t(id: str, kind: str, text: str, weight: int, *domains: str) -> StreamTemplate:
    return StreamTemplate(id=id, kind=kind, text=text, weight=weight, requires_domain=domains or None)


# ── Generic templates ─────────────────────────────────────

GENERIC_TEMPLATES = (
    # idle
    _t("idle-001", "idle", "...", 5),
    _t("idle-002", "idle", "Hmm.", 3),
    _t("idle-003", "idle", "Another day in {{DOMAIN}}.", 8),
    _t("idle-004", "idle", "The {{ELEMENT}} feels different today.", 6),
    _t("idle-005", "idle", "Wonder what {{NPC_NAME}} is up to.", 7),
    _t("idle-006", "idle", "Same as always. Yet... different.", 4),
    _t("idle-007", "idle", "Time moves strangely here. {{TIME_UNIT}} feel like minutes.", 5),
    _t("idle-008", "idle", "{{CATCHPHRASE}}", 10),
    _t("idle-009", "idle", "Days blend together. Is it still day {{SEED_DAY}}?", 4),
    _t("idle-010", "idle", "The {{ATMOSPHERE}} air is {{INTENSITY}} today.", 5),
    _t("idle-earth-001", "idle", "Ground feels solid. That means something.", 6, "earth"),
    _t("idle-frost-001", "idle", "The cold never bothers me. Much.", 6, "frost-reach"),
    _t("idle-fire-001", "idle", "Something is always burning here. Always.", 6, "infernus"),
    _t("idle-death-001", "idle", "The shadows whisper. I try not to listen.", 6, "shadow-keep"),
    _t("idle-void-001", "idle", "Null space. Null thoughts. Null...", 6, "null-providence"),
    _t("idle-wind-001", "idle", "Reality shifts again. Must be Tuesday.", 6, "aberrant"),
    # relationship
    _t("rel-001", "relationship", "Saw {{NPC_NAME}} earlier. {{REACTION}}.", 10),
    _t("rel-002", "relationship", "{{NPC_NAME}} hasn't said much lately.", 6),
    _t("rel-003", "relationship", "Wonder if {{NPC_NAME}} remembers {{SHARED_EVENT}}.", 5),
    _t("rel-004", "relationship", "{{NPC_NAME}}... {{OPINION}}.", 8),
    _t("rel-005", "relationship", "Haven't seen {{NPC_NAME}} in {{TIME_UNIT}}.", 6),
    _t("rel-006", "relationship", "{{NPC_NAME}} thinks they know {{TOPIC}}. {{OPINION}}.", 4),
    _t("rel-007", "relationship", "{{NPC_NAME}}, {{NPC_NAME}}, {{NPC_NAME}}. {{REACTION}}.", 4),
    _t("rel-008", "relationship", "If {{NPC_NAME}} says it's true, it's probably true.", 4),
    _t("rel-009", "relationship", "{{NPC_NAME}}. You still here?", 3),
    _t("rel-010", "relationship", "{{NPC_NAME}} and I survived {{SHARED_EVENT}}. {{INTENSITY}} times.", 3),
    _t("rel-011", "relationship", "Someone should tell {{NPC_NAME}} about their... {{FLAW}}.", 3),
    _t("rel-012", "relationship", "{{NPC_NAME}}? Always {{BEHAVIOR}}.", 4),
    # lore
    _t("lore-001", "lore", "Did you know? {{LORE_FACT}}.", 8),
    _t("lore-002", "lore", "They say {{LORE_FACT}}. I believe it.", 7),
    _t("lore-003", "lore", "Heard a rumor: {{LORE_FACT}}.", 6),
    _t("lore-004", "lore", "In {{DOMAIN}}, {{LORE_FACT}}.", 6),
    _t("lore-005", "lore", "Here's something most don't know: {{LORE_FACT}}.", 5),
    _t("lore-006", "lore", "Some say there is a way out. I wonder...", 4),
    _t("lore-007", "lore", "The game never ends. Or does it?", 3),
    _t("lore-008", "lore", "The Die-rectors... {{DIRECTOR_FACT}}", 4),
    _t("lore-009", "lore", "Before the game, {{ORIGIN_FACT}}.", 3),
    # meta
    _t("meta-001", "meta", "Another day. Another broadcast.", 8),
    _t("meta-002", "meta", "Is anyone even watching? Hello?", 6),
    _t("meta-003", "meta", "Cursed app. Cursed stream. Cursed eternity.", 5),
    _t("meta-004", "meta", "Same conversations. Different day. Seed {{SEED}}.", 4),
    _t("meta-005", "meta", "We do this forever, you know. For {{TIME_UNIT}}.", 5),
    _t("meta-006", "meta", "The algorithm is {{INTENSITY}} today.", 3),
    _t("meta-007", "meta", "Day {{SEED_DAY}} of infinity.", 5),
    _t("meta-008", "meta", "Seed {{SEED}} feels... familiar.", 4),
    _t("meta-009", "meta", "To whoever is tuning in: welcome to eternity.", 5),
    _t("meta-010", "meta", "You can change the date, you know. Different day, different conversation.", 3),
)

# ── Per-NPC overrides (keyed by VoiceProfile.template_override_key) ──

NPC_OVERRIDES: dict[str, tuple[StreamTemplate, ...]] = {
    "willy": (
        _t("willy-idle-001", "idle", "See what others miss... that's the trade.", 10),
        _t("willy-idle-002", "idle", "Inventory check... still have everything. Mostly.", 5),
        _t("willy-idle-003", "idle", "The dimensions shift, but deals remain deals.", 6),
        _t("willy-rel-001", "relationship", "{{NPC_NAME}}... good customer. When they pay.", 8),
        _t("willy-rel-002", "relationship", "Saw {{NPC_NAME}} eyeing my wares. Interesting...", 7),
        _t("willy-rel-003", "relationship", "{{NPC_NAME}} owes me. They know what they owe.", 6),
        _t("willy-meta-001", "meta", "Eternal broadcast, eternal commerce. Works for me.", 6),
    ),
    "mr-bones": (
        _t("bones-idle-001", "idle", "Death and taxes. The only certainties. I handle both.", 10),
        _t("bones-idle-002", "idle", "Another soul for the ledger. The ledger never sleeps.", 8),
        _t("bones-idle-003", "idle", "*rattles contemplatively*", 4),
        _t("bones-lore-001", "lore", "The Die-rectors track wins and losses. I track everything else.", 8),
        _t("bones-lore-002", "lore", "Every player has a tab. Most never see the bill.", 6),
        _t("bones-meta-001", "meta", "Day {{SEED_DAY}}. Adding it to the records.", 5),
    ),
    "dr-maxwell": (
        _t("maxwell-idle-001", "idle", "Some knowledge is too dangerous to preserve. So I burn it.", 10),
        _t("maxwell-idle-002", "idle", "*adjusts spectacles, ignites manuscript*", 5),
        _t("maxwell-lore-001", "lore", "The library held everything. Then I arrived.", 7),
        _t("maxwell-lore-002", "lore", "Infernus was not always fire. But fire found it. Through me.", 5),
    ),
    "boo-g": (
        _t("boog-idle-001", "idle", "Let me drop a beat from the afterlife, y'all.", 10),
        _t("boog-idle-002", "idle", "*ghostly freestyle intensifies*", 5),
        _t("boog-rel-001", "relationship", "{{NPC_NAME}}! What's the vibe today?", 8),
        _t("boog-rel-002", "relationship", "Me and {{NPC_NAME}} go way back. Way, way back.", 6),
        _t("boog-meta-001", "meta", "Broadcasting from beyond. Forever. Literally.", 6),
    ),
    "xtreme": (
        _t("xtreme-idle-001", "idle", "NO RISK NO REWARD! THAT IS THE WAY!", 9),
        _t("xtreme-idle-002", "idle", "Odds? ODDS ARE FOR COWARDS!", 7),
        _t("xtreme-rel-001", "relationship", "{{NPC_NAME}}! WANT TO GAMBLE?! OF COURSE YOU DO!", 9),
        _t("xtreme-rel-002", "relationship", "{{NPC_NAME}} plays it safe. BORING! But I still like them!", 6),
        _t("xtreme-meta-001", "meta", "Day {{SEED_DAY}}! EVERY DAY IS A NEW BET!", 6),
    ),
    "stitch-up-girl": (
        _t("stitch-idle-001", "idle", "Needle ready. Thread ready. Patience... optional.", 7),
        _t("stitch-idle-002", "idle", "*checks suture kit* Still stocked. Good.", 5),
        _t("stitch-rel-001", "relationship", "{{NPC_NAME}} looks like they need patching up. Again.", 8),
        _t("stitch-rel-002", "relationship", "I've stitched {{NPC_NAME}} back together more times than I can count.", 7),
        _t("stitch-lore-001", "lore", "The Die-rectors don't bleed. But everything else does.", 7),
    ),
    "the-general-traveler": (
        _t("general-t-idle-001", "idle", "The revolution continues. Always.", 7),
        _t("general-t-rel-001", "relationship", "{{NPC_NAME}} is one of us. A true ally.", 8),
        _t("general-t-rel-002", "relationship", "{{NPC_NAME}} fights well. We'll need that.", 7),
        _t("general-t-lore-001", "lore", "The Die-rectors have weaknesses. We will find them.", 6),
    ),
    "boots": (
        _t("boots-idle-001", "idle", "Worn leather, worn soul. Still walking.", 6),
        _t("boots-idle-002", "idle", "I've been where you're going. It's... complicated.", 7),
        _t("boots-lore-001", "lore", "There's a path between domains. Hidden. I've walked it.", 7),
        _t("boots-lore-002", "lore", "Some roads lead nowhere. I've mapped them all.", 6),
    ),
}

# ── Word pools ────────────────────────────────────────────

REACTIONS = {
    "positive": ("Good to see them", "Always a pleasure", "Made my day better", "Reliable as ever"),
    "neutral": ("They were there", "Can't say much", "Typical", "Expected"),
    "negative": ("Wish I hadn't", "Kept my distance", "Awkward", "Let's not discuss"),
    "teasing": ("Classic them", "Never changes", "Predictable", "Almost funny"),
}

OPINIONS = {
    "positive": ("solid", "knows their stuff", "trustworthy", "one of the good ones"),
    "neutral": ("exists, I suppose", "hard to read", "mysterious in their way", "just... there"),
    "negative": ("problematic", "tolerable at best", "I have thoughts", "let's change the subject"),
    "teasing": ("trying their best, bless them", "a character, that one",
                "entertaining, unintentionally", "consistent, I'll give them that"),
}

INTENSITIES = ("strong", "faint", "overwhelming", "subtle", "persistent", "strange")

TIME_UNITS = ("a while", "ages", "cycles", "forever", "days", "eternities")

SHARED_EVENTS = (
    "the old days", "what happened before", "that thing",
    "the incident", "last cycle", "the time we almost",
)

LORE_FACTS = (
    "time works differently",
    "the rules are suggestions",
    "death is temporary but pain is real",
    "the Die-rectors watch everything",
    "gold flows in strange patterns",
    "the Die-rectors disagree more than they let on",
    "we had names once. Real names",
)

# Context-only pools, drawn once per entry by the generator.

FLAWS = (
    "overconfidence", "stubborn streak", "talking habit",
    "predictability", "optimism", "dramatic flair",
)

BEHAVIORS = ("the same", "unpredictable", "mysterious", "loud", "scheming", "wandering")

DIRECTOR_FACTS = (
    "were once like us. Or so I heard.",
    "have their own games within the game.",
    "disagree more than they let on.",
    "each rule their element absolutely.",
)

ORIGIN_FACTS = (
    "there was something else",
    "the game was different",
    "we had names. Real names",
    "death meant something",
)
