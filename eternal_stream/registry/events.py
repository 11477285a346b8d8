"""Special events, their content pools, and reply templates.

Special-event templates may use the event pools below as context fields
({{SECRET}}, {{PROPHECY}}, {{MEMORY}}, {{GLITCH}}, {{DECREE}}) next to
{{SPEAKER}} and the resolved {{NPC_NAME}} (the event's target).

Reply templates address the parent speaker through {{NPC_NAME}}.
"""

from eternal_stream.models import ReplyTemplate, SpecialEventSpec

DIRECTORS = ("the-one", "john", "peter", "robert", "alice", "jane", "rhea")

SPECIAL_EVENTS = (
    SpecialEventSpec(
        type="secret-reveal",
        weight=3,
        kind="lore",
        eligible_npcs=("mr-bones", "willy", "stitch-up-girl", "the-general-traveler"),
        templates=(
            "I shouldn't say this, but... {{SECRET}}",
            "You want to know a secret? {{SECRET}}",
            "Few know this: {{SECRET}}",
            "*lowers voice* {{SECRET}}",
        ),
    ),
    SpecialEventSpec(
        type="confrontation",
        weight=2,
        kind="relationship",
        requires_edge="rival",
        templates=(
            "{{NPC_NAME}}, we need to talk. Now.",
            "Enough, {{NPC_NAME}}. This ends.",
            "{{NPC_NAME}}. I've been waiting for this.",
            "*stands to face {{NPC_NAME}}* You know why.",
        ),
    ),
    SpecialEventSpec(
        type="prophecy",
        weight=2,
        kind="lore",
        eligible_npcs=("mr-bones", "rhea", "clausen", "the-one"),
        templates=(
            "I see it now... {{PROPHECY}}",
            "The bones speak: {{PROPHECY}}",
            "A pattern emerges... {{PROPHECY}}",
            "*stares into nothing* {{PROPHECY}}",
        ),
    ),
    SpecialEventSpec(
        type="meta-glitch",
        weight=1,
        kind="meta",
        eligible_domains=("null-providence", "aberrant"),
        templates=(
            "*static* --did you hear that?",
            "Something is wrong with the-- {{GLITCH}}",
            "[STREAM ERROR: CONSCIOUSNESS FRAGMENT DETECTED]",
            "*flickers* W-where was I? Who was I?",
            "*voice distorts* This isn't the first time we've had this conversation.",
            "ERROR: MEMORY LOOP DETECTED. IGNORING.",
        ),
    ),
    SpecialEventSpec(
        type="director-appearance",
        weight=1,
        kind="meta",
        eligible_npcs=DIRECTORS,
        templates=(
            "*the air shifts* {{SPEAKER}} is watching now.",
            "{{SPEAKER}} has arrived. The domain trembles.",
            "*silence falls* {{SPEAKER}} speaks: '{{DECREE}}'",
            "The Die-rector is here. Everyone feels it.",
        ),
    ),
    SpecialEventSpec(
        type="memory-fragment",
        weight=3,
        kind="lore",
        eligible_npcs=("clausen", "boots", "stitch-up-girl", "mr-bones", "willy"),
        templates=(
            "I remember... before all this... {{MEMORY}}",
            "*pauses* There was a time when... no. Never mind.",
            "Sometimes I dream of {{MEMORY}} Was it real?",
            "{{MEMORY}} Does anyone else remember that?",
        ),
    ),
    SpecialEventSpec(
        type="alliance",
        weight=2,
        kind="relationship",
        eligible_npcs=("the-general-traveler", "stitch-up-girl", "boots", "clausen"),
        requires_edge="ally",
        templates=(
            "{{NPC_NAME}}, I think we should work together.",
            "An alliance, {{NPC_NAME}}. What do you say?",
            "*extends hand to {{NPC_NAME}}* Against the Die-rectors. Together.",
            "{{NPC_NAME}} and I have reached an understanding.",
        ),
    ),
    SpecialEventSpec(
        type="threat",
        weight=2,
        kind="relationship",
        eligible_npcs=("the-one", "john", "the-general-traveler", "stitch-up-girl"),
        templates=(
            "{{NPC_NAME}}... I'm warning you.",
            "Cross me again, {{NPC_NAME}}, and see what happens.",
            "This is not a threat, {{NPC_NAME}}. It's a promise.",
            "*eyes {{NPC_NAME}}* Choose your next words carefully.",
        ),
    ),
    SpecialEventSpec(
        type="exit-rumor",
        weight=2,
        kind="lore",
        eligible_npcs=("boots", "willy", "clausen", "the-general-traveler"),
        templates=(
            "They say there's a way out. A door no Die-rector can see.",
            "An exit exists. I've heard the whispers.",
            "What if the game could end? Really end?",
            "The seventh domain. That's where the exit is. Maybe.",
        ),
    ),
    SpecialEventSpec(
        type="player-reference",
        weight=3,
        kind="meta",
        templates=(
            "*looks toward the viewer* Yes, you. I know you're there.",
            "The ones watching... do they ever play? Or just observe?",
            "Hello, player. Still tuned in?",
            "Some say we're watched. Some say we're controlled. I say... both.",
        ),
    ),
)

# Event types whose template names a second NPC.
TARGETED_EVENTS = frozenset({"confrontation", "alliance", "threat"})

# ── Event content pools ───────────────────────────────────

EVENT_POOLS: dict[str, tuple[str, ...]] = {
    "SECRET": (
        "The Die-rectors were once human. They gave that up.",
        "There's a door behind the void. It leads somewhere real.",
        "Mr. Bones knows when everyone will die. He checks his ledger.",
        "The game resets more often than anyone remembers.",
        "The travelers have a plan. It's almost ready.",
        "One of the Die-rectors wants out. I won't say which.",
    ),
    "PROPHECY": (
        "One will break the game. One will end the cycle.",
        "The seventh domain awakens. Soon.",
        "A player will do what we cannot. When they are ready.",
        "The Die-rectors will fall. Not today. Not tomorrow. But soon.",
        "Death will claim the immortals. Even them.",
    ),
    "MEMORY": (
        "sunlight. Real sunlight. Not the simulated kind.",
        "having a name. A real name. Not this one.",
        "dying and it meaning something. Staying dead.",
        "a world outside the domains. Buildings. Streets. People.",
        "playing a different game. One with an end.",
    ),
    "GLITCH": (
        "[DATA CORRUPTED]",
        "[TIMELINE MISMATCH]",
        "[REALITY ANCHOR FAILING]",
        "[LOOP DETECTED]",
        "--UNDEFINED--",
    ),
    "DECREE": (
        "The game continues.",
        "No one leaves.",
        "Order will be maintained.",
        "I decide who lives. And who dies. And who lives again.",
    ),
}

# ── Reply templates ───────────────────────────────────────


def _r(id: str, text: str, weight: int, triggered_by: str = "any", *relationships: str) -> ReplyTemplate:
    return ReplyTemplate(
        id=id, text=text, weight=weight, triggered_by=triggered_by,
        relationships=relationships or None,
    )


REPLY_TEMPLATES = (
    _r("resp-001", "{{NPC_NAME}}... {{REACTION}}.", 8),
    _r("resp-002", "*acknowledges {{NPC_NAME}}*", 4),
    _r("resp-003", "Hmm. {{NPC_NAME}} has a point.", 5),
    _r("resp-idle-001", "{{NPC_NAME}} is in a mood today.", 6, "idle"),
    _r("resp-idle-002", "*glances at {{NPC_NAME}}* Same as always.", 5, "idle"),
    _r("resp-idle-003", "Did {{NPC_NAME}} just say something?", 4, "idle"),
    _r("resp-rel-001", "{{NPC_NAME}} is talking about me? Interesting.", 7, "relationship"),
    _r("resp-rel-002", "I heard that, {{NPC_NAME}}.", 8, "relationship"),
    _r("resp-rel-003", "{{NPC_NAME}} and their opinions...", 5, "relationship"),
    _r("resp-lore-001", "{{NPC_NAME}} knows things. Dangerous things.", 6, "lore"),
    _r("resp-lore-002", "Is that true, what {{NPC_NAME}} said?", 5, "lore"),
    _r("resp-lore-003", "I knew that. Everyone knows that.", 4, "lore"),
    _r("resp-meta-001", "{{NPC_NAME}} gets philosophical. Again.", 5, "meta"),
    _r("resp-meta-002", "We all think about it, {{NPC_NAME}}.", 4, "meta"),
    _r("resp-special-001", "Did everyone hear what {{NPC_NAME}} just said?", 7, "special"),
    _r("resp-special-002", "*stares at {{NPC_NAME}}* You can't be serious.", 6, "special"),
    _r("resp-special-003", "That's... {{INTENSITY}}, {{NPC_NAME}}. Even for you.", 4, "special"),
    _r("resp-ally-001", "{{NPC_NAME}} speaks truth.", 9, "any", "ally", "old-friend"),
    _r("resp-ally-002", "I agree with {{NPC_NAME}}. Always do.", 7, "any", "ally", "old-friend"),
    _r("resp-ally-003", "*nods at {{NPC_NAME}}*", 6, "any", "ally", "old-friend"),
    _r("resp-rival-001", "{{NPC_NAME}} would say that.", 8, "any", "rival"),
    _r("resp-rival-002", "Of course {{NPC_NAME}} thinks so.", 7, "any", "rival"),
    _r("resp-rival-003", "*rolls eyes at {{NPC_NAME}}*", 5, "any", "rival"),
    _r("resp-enemy-001", "...", 6, "any", "enemy"),
    _r("resp-enemy-002", "*ignores {{NPC_NAME}}*", 8, "any", "enemy"),
    _r("resp-enemy-003", "{{NPC_NAME}}. Still here. Unfortunately.", 5, "any", "enemy"),
    _r("resp-fear-001", "*listens to {{NPC_NAME}} carefully*", 7, "any", "fear-respect"),
    _r("resp-fear-002", "{{NPC_NAME}} commands attention.", 6, "any", "fear-respect"),
)

# Replies from an NPC who was named in the parent entry, keyed by how the
# responder regards the parent speaker.
MENTION_REACTIONS: dict[str, tuple[str, ...]] = {
    "teases": (
        "{{NPC_NAME}} again? What now.",
        "I heard that, {{NPC_NAME}}.",
        "{{NPC_NAME}} talks a lot.",
    ),
    "respects": (
        "{{NPC_NAME}} mentioned me?",
        "*listens to what {{NPC_NAME}} said*",
        "Interesting, coming from {{NPC_NAME}}.",
    ),
    "avoids": (
        "*doesn't acknowledge {{NPC_NAME}}*",
        "...",
        "I have nothing to say about that.",
    ),
    "default": (
        "{{NPC_NAME}}? What about me?",
        "Did someone say my name?",
        "*looks at {{NPC_NAME}}*",
    ),
}
