"""
Core building blocks: tool catalog, dispatcher, and handler base class.
"""
