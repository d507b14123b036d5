"""Quini 6 results scraping core."""
