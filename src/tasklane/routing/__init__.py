"""Page routing — a compiled table mapping URL paths to views.

Routes are registered once, compiled into an immutable trie, and resolved
on every navigation.
"""
