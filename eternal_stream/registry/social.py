"""Social graph: directed relationship edges between NPCs.

Strength is normalised to 0–1 (the cast sheet grades it 1–10). An edge is
directed (source's view of target); lookups fall back to the reverse edge
when only one side is recorded.

Only ally, mentor and rumor-source edges carry knowledge. Rivals never
trade secrets, whatever else links them.
"""

from eternal_stream.models import RelationshipEdge, RelationshipType

KNOWLEDGE_CARRYING: frozenset[RelationshipType] = frozenset({"ally", "mentor", "rumor-source"})


def _edge(source: str, target: str, type: RelationshipType, grade: int, history: str = "") -> RelationshipEdge:
    return RelationshipEdge(
        source_id=source, target_id=target, type=type, strength=grade / 10, history=history,
    )


EDGES = (
    # Die-rectors among themselves
    _edge("the-one", "john", "colleague", 7),
    _edge("the-one", "peter", "colleague", 6),
    _edge("the-one", "robert", "rival", 5),
    _edge("the-one", "jane", "ally", 8),
    _edge("the-one", "rhea", "ally", 7),
    _edge("john", "the-one", "fear-respect", 9),
    _edge("john", "peter", "rival", 5),
    _edge("john", "jane", "ally", 7),
    _edge("alice", "jane", "rival", 6, "Fire and ice"),
    _edge("rhea", "mr-bones", "mentor", 7, "She taught him to keep the ledger"),
    # Die-rectors and the cast
    _edge("the-one", "stitch-up-girl", "enemy", 6),
    _edge("the-general-traveler", "the-one", "enemy", 9),
    _edge("stitch-up-girl", "the-one", "enemy", 8),
    _edge("stitch-up-girl", "peter", "enemy", 7),
    _edge("dr-maxwell", "alice", "ally", 6, "Both feed the flames"),
    _edge("robert", "boo-g", "rumor-source", 5, "The wind carries his gossip"),
    # Travelers
    _edge("stitch-up-girl", "the-general-traveler", "ally", 9),
    _edge("stitch-up-girl", "body-count", "ally", 7),
    _edge("stitch-up-girl", "boots", "old-friend", 7),
    _edge("stitch-up-girl", "clausen", "ally", 6),
    _edge("stitch-up-girl", "willy", "ally", 6),
    _edge("the-general-traveler", "body-count", "colleague", 8),
    _edge("the-general-traveler", "clausen", "old-friend", 8),
    _edge("the-general-traveler", "the-general-wanderer", "old-friend", 8, "War buddies from old campaigns"),
    _edge("body-count", "mr-kevin", "ally", 6, "Statistics enthusiasts"),
    _edge("body-count", "clausen", "colleague", 5, "Tracking the departed"),
    _edge("boots", "xtreme", "old-friend", 8),
    _edge("boots", "boo-g", "ally", 7),
    _edge("boots", "willy", "ally", 6, "Good customer"),
    _edge("boots", "keith-man", "mentor", 6, "Showed him every road out of Earth"),
    _edge("boots", "clausen", "rumor-source", 5, "Brings back news from every domain"),
    _edge("boots", "king-james", "rival", 3, "Kicked his crown once"),
    _edge("mr-kevin", "keith-man", "ally", 6, "Pattern watchers"),
    _edge("mr-kevin", "dr-voss", "colleague", 5),
    _edge("keith-man", "xtreme", "rival", 4, "Chaos vs order"),
    # Wanderers
    _edge("mr-bones", "willy", "old-friend", 8, "Fellow skeletons from the early days"),
    _edge("mr-bones", "boo-g", "ally", 6, "Undead solidarity"),
    _edge("mr-bones", "dr-voss", "rival", 4, "Voss once tried to study his bones"),
    _edge("mr-bones", "king-james", "acquaintance", 3),
    _edge("mr-bones", "clausen", "mentor", 6, "Taught him to count the cycles"),
    _edge("boo-g", "xtreme", "old-friend", 8),
    _edge("boo-g", "king-james", "rival", 4, "Royalty vs street performer"),
    _edge("willy", "xtreme", "rumor-source", 6, "Gambles at Willy's shop and hears everything"),
    _edge("willy", "the-general-traveler", "ally", 6),
    _edge("dr-maxwell", "dr-voss", "rival", 7, "Academic rivalry"),
    _edge("dr-maxwell", "body-count", "colleague", 5),
    _edge("dr-voss", "king-james", "colleague", 6, "Both Null Providence elite"),
    _edge("dr-voss", "clausen", "ally", 5),
    _edge("xtreme", "clausen", "rival", 4, "Order vs EXTREME chaos"),
    _edge("the-general-wanderer", "body-count", "ally", 7),
    _edge("the-general-wanderer", "john", "enemy", 6),
)
