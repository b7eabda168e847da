def total_seconds(minutes: int, seconds: int) -> int:
	"""Collapse a minutes/seconds pair into whole seconds."""
	return minutes * 60 + seconds

def fmt_mmss(minutes: int, seconds: int) -> str:
	"""Format a countdown value as MM:SS."""
	return f"{minutes:02}:{seconds:02}"
