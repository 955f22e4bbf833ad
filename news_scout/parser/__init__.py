# news_scout/parser/__init__.py
from news_scout.parser.html_parser import ArticleFields, parse_article, parse_date, parse_listing

__all__ = ["ArticleFields", "parse_article", "parse_date", "parse_listing"]
