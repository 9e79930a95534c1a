"""Domain services: aggregation, planning, logging and CSV exchange."""
