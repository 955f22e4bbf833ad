# news_scout/crawler/__init__.py
"""Crawl layer: fetching, article extraction, link collection and the crawl loop."""
