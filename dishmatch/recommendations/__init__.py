"""
Dish recommendation engine.

Responsibilities:
- Accept pasted menu text and a taste profile (liked / disliked / avoid ingredient ids).
- Resolve the catalog ingredients mentioned on every dish line.
- Score each dish against the profile and explain the score.
- Rank dishes best first, keeping unsafe dishes visible at the bottom.
"""
