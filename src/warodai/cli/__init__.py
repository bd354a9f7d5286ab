"""
Command-line interface entry points for warodai-yomichan.

Entry points:
- warodai2yomi: Convert a Warodai source tree into a Yomichan dictionary
"""
