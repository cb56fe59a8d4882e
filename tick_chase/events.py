"""Signal names published on the session bus, with their payload keys."""

COLLECTIBLE_CONSUMED = "collectible_consumed"  # tier, position
ADVERSARY_CAPTURED = "adversary_captured"  # name, position
ADVERSARY_MODE_CHANGED = "adversary_mode_changed"  # name, old, new
AGENT_DIED = "agent_died"  # lives, killer
AGENT_RESPAWNED = "agent_respawned"
GAME_OVER = "game_over"  # score
VICTORY = "victory"  # score
SCORE_CHANGED = "score_changed"  # score, delta
LIVES_CHANGED = "lives_changed"  # lives
STATE_CHANGED = "state_changed"  # old, new
