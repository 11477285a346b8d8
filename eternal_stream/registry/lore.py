"""Lore pools and NPC knowledge seeds.

LORE_POOLS holds per-domain facts keyed by `DomainContext.lore_pool_ref`,
plus the cross-domain pool "all" that every domain sees. Lore known by an
NPC doubles as that NPC's knowledge: rare lore is a rumor, secret lore a
secret (see `Registry.knowledge_of`). KNOWLEDGE adds pieces that belong to no
single domain.
"""

from eternal_stream.models import KnowledgePiece, LoreItem


def _lore(id: str, domain: str, secrecy: str, content: str, short_form: str, *known_by: str) -> LoreItem:
    return LoreItem(
        id=id, domain=domain, secrecy=secrecy, content=content,
        short_form=short_form, known_by=known_by,
    )


LORE_POOLS: dict[str, tuple[LoreItem, ...]] = {
    "earth": (
        _lore("earth-001", "earth", "public", "Earth is where all journeys begin. And often end.",
              "Earth is the beginning", "willy", "stitch-up-girl", "boots", "peter"),
        _lore("earth-002", "earth", "common", "The merchants of Earth trade in more than goods. They trade in hope.",
              "merchants trade hope here", "willy", "xtreme", "keith-man"),
        _lore("earth-003", "earth", "rare", "Peter claims Earth as his domain, but something else shaped it first.",
              "Peter was not first here", "willy", "mr-bones", "boots"),
        _lore("earth-004", "earth", "secret", "Beneath Earth lies a door. It leads somewhere the Die-rectors cannot reach.",
              "a hidden door exists", "stitch-up-girl", "the-general-traveler"),
    ),
    "frost-reach": (
        _lore("frost-001", "frost-reach", "public", "Frost Reach freezes more than flesh. It freezes time itself.",
              "time freezes here", "jane", "stitch-up-girl", "boots"),
        _lore("frost-002", "frost-reach", "common", "Jane rules Frost Reach with patience. Glacial patience.",
              "Jane is endlessly patient", "jane", "the-general-traveler", "willy"),
        _lore("frost-003", "frost-reach", "rare", "The ice preserves memories. Walk deep enough and you'll hear them.",
              "ice holds memories", "jane", "mr-bones", "clausen"),
        _lore("frost-004", "frost-reach", "secret", "Frost Reach was not always frozen. Jane brought the cold to escape something worse.",
              "the cold hides something", "the-one", "jane"),
    ),
    "infernus": (
        _lore("infernus-001", "infernus", "public", "Infernus burns eternally. The flames have never dimmed since Alice arrived.",
              "eternal fire", "alice", "dr-maxwell", "body-count"),
        _lore("infernus-002", "infernus", "common", "Fire transforms what it touches. In Infernus, everything is mid-transformation.",
              "everything transforms here", "alice", "dr-maxwell"),
        _lore("infernus-003", "infernus", "rare", "Dr. Maxwell's library existed here before the flames. Now it burns with them.",
              "the burning library", "dr-maxwell", "alice"),
        _lore("infernus-004", "infernus", "secret", "The fire in Infernus is not natural. It feeds on something from before.",
              "unnatural fire", "alice", "the-one"),
    ),
    "shadow-keep": (
        _lore("shadow-001", "shadow-keep", "public", "Shadow Keep is where death lives. Ironic, isn't it?",
              "where death lives", "rhea", "mr-bones", "john"),
        _lore("shadow-002", "shadow-keep", "common", "The shadows here are not absence of light. They are presence of something else.",
              "shadows have presence", "rhea", "the-general-traveler", "body-count"),
        _lore("shadow-003", "shadow-keep", "rare", "Rhea embraces all who die. But some, she holds longer than others.",
              "Rhea chooses who stays", "rhea", "mr-bones"),
        _lore("shadow-004", "shadow-keep", "secret", "The Keep existed before the Die-rectors. The shadows remember the true rulers.",
              "older than Die-rectors", "rhea", "the-one"),
        _lore("shadow-005", "shadow-keep", "common", "Death is just a door. Shadow Keep is where the doors are kept.",
              "doors of death", "rhea", "mr-bones", "the-general-wanderer"),
    ),
    "null-providence": (
        _lore("null-001", "null-providence", "public", "Null Providence is the space between. Between everything.",
              "the between space", "the-one", "dr-voss", "king-james"),
        _lore("null-002", "null-providence", "common", "The One claims the void as their domain. The void doesn't disagree.",
              "The One owns the void", "the-one", "john", "king-james"),
        _lore("null-003", "null-providence", "rare", "Dr. Voss has measured the void. The measurements change every time.",
              "the void changes", "dr-voss", "clausen"),
        _lore("null-004", "null-providence", "secret", "The void is not empty. Everything erased ends up here.",
              "repository of the erased", "the-one", "dr-voss"),
        _lore("null-005", "null-providence", "common", "King James rules a kingdom of nothing. He says that is everything.",
              "kingdom of nothing", "king-james", "mr-kevin", "clausen"),
    ),
    "aberrant": (
        _lore("aberrant-001", "aberrant", "public", "Reality bends and breaks in Aberrant. Robert likes it that way.",
              "reality breaks here", "robert", "boo-g", "xtreme"),
        _lore("aberrant-002", "aberrant", "common", "The wind in Aberrant whispers secrets. Some are true. Most aren't.",
              "whispering winds", "robert", "clausen", "boots"),
        _lore("aberrant-003", "aberrant", "rare", "The chaos in Aberrant follows a pattern too complex to perceive.",
              "chaos has a pattern", "robert", "dr-voss"),
        _lore("aberrant-004", "aberrant", "secret", "Robert was not always like this. The wind is still changing him.",
              "Robert is still changing", "the-one", "robert"),
    ),
    "all": (
        _lore("cross-001", "all", "public", "The Die-rectors each claim a domain, but their power extends everywhere.",
              "Die-rector power is everywhere", "willy", "stitch-up-girl", "the-general-traveler"),
        _lore("cross-002", "all", "common", "The game has rules. Breaking them is possible. Surviving that is another matter.",
              "rules can be broken", "mr-bones", "the-general-traveler", "boots"),
        _lore("cross-003", "all", "rare", "The Die-rectors were once players. The best players. Or the worst.",
              "Die-rectors were players", "mr-bones", "the-one", "willy"),
        _lore("cross-004", "all", "secret", "There is a seventh domain. Unmarked. Unreached. Unspoken.",
              "a seventh domain exists", "the-one", "mr-bones"),
        _lore("cross-005", "all", "common", "Death is not the end. But the true end? No one speaks of it.",
              "the true end is unknown", "rhea", "mr-bones", "clausen"),
    ),
}


def _piece(id: str, owner: str, topic: str, secrecy: str, content: str, short_form: str) -> KnowledgePiece:
    return KnowledgePiece(
        id=id, owner_id=owner, topic=topic, secrecy=secrecy, content=content, short_form=short_form,
    )


KNOWLEDGE = (
    _piece("exit-exists:robert", "robert", "escape", "rumor",
           "They say there's a way out of the game. A door that leads to true freedom.",
           "there might be an exit"),
    _piece("exit-exists:boots", "boots", "escape", "rumor",
           "They say there's a way out of the game. A door that leads to true freedom.",
           "there might be an exit"),
    _piece("bones-prophecy:willy", "willy", "prophecy", "rumor",
           "Mr. Bones made a prophecy: a player will end the game itself.",
           "Mr. Bones prophesied the end"),
    _piece("bones-prophecy:mr-bones", "mr-bones", "prophecy", "secret",
           "I made a prophecy once. A player will end the game itself.",
           "a player will end the game"),
    _piece("market-passage:willy", "willy", "trade", "secret",
           "There's a hidden passage behind the market that bypasses the Die-rector checkpoint.",
           "a secret market passage"),
    _piece("market-passage:stitch-up-girl", "stitch-up-girl", "escape", "secret",
           "There's a hidden passage behind the market that bypasses the Die-rector checkpoint.",
           "a secret market passage"),
    _piece("director-origin:the-one", "the-one", "die-rectors", "secret",
           "The Die-rectors were once mortal game designers who transcended through a ritual no one remembers.",
           "the Die-rectors were once human"),
    _piece("director-origin:john", "john", "die-rectors", "secret",
           "The Die-rectors were once mortal game designers who transcended through a ritual no one remembers.",
           "the Die-rectors were once human"),
    _piece("the-game:mr-kevin", "mr-kevin", "game", "public",
           "The game has been running longer than anyone remembers. Deaths reset, memories remain.",
           "the game never ends"),
    _piece("revolution-plan:the-general-traveler", "the-general-traveler", "revolution", "secret",
           "The travelers have a plan. It's almost ready.",
           "the travelers have a plan"),
)
