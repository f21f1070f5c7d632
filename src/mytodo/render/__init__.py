"""Display projection (escaped text, due-date labels, controls, counters)."""
