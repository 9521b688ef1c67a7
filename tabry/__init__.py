"""Tabry - a shell tab-completion engine driven by a compiled command tree.

Splits the command line typed so far, walks it through the command tree of
the program being completed and prints the candidate completions for the
word under the cursor.
"""
