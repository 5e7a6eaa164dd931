"""The flawed halves of each snippet pair.

Kept runnable so the demos can show how each violation fails or couples.
Class names mirror their refactored counterparts in :mod:`solidctl.domain`.
"""
