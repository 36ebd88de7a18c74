"""Trace link recovery between documentation mentions and software model elements."""
