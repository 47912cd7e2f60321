"""
Default tunables for the animation primitives.

All times are milliseconds, all offsets are CSS pixels. These values are shared by
the Python engine and emitted into the page for animations.js, so the browser and
the print snapshot agree on timing.
"""

# Frame cadence used by the scheduler for request_frame()
FRAME_INTERVAL_MS = 16

# Reveal (fade + slide in)
REVEAL_THRESHOLD = 0.2
REVEAL_DURATION_MS = 600
REVEAL_OFFSET_PX = 30
REVEAL_EASING = "ease"

# Numeric counter
COUNTER_DURATION_MS = 2000
COUNTER_EASING = "linear"
COUNTER_THRESHOLD = 0.2

# Typewriter
TYPEWRITER_SPEED_MS = 50
CARET_PERIOD_MS = 1000

# Skill bar fill
SKILL_BAR_DURATION_MS = 1000
SKILL_BAR_EASING = "ease"
SKILL_BAR_THRESHOLD = 0.2

# Scroll / pointer sampling
SCROLLED_THRESHOLD_PX = 50
PARALLAX_FACTOR = 0.5
POINTER_FACTOR = 0.02
