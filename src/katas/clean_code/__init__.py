"""Clean code katas: naming, function design and formatting.

Each concept ships as ``<concept>_bad`` and ``<concept>_good``. The modules
reuse class names on purpose, so import them by module rather than from here.
"""
