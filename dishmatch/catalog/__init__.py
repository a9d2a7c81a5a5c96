"""
Ingredient catalog package.

Responsibilities:
- Load the ingredient vocabulary (id, canonical name, aliases) from a JSON file.
- Reject inconsistent catalogs (duplicate ids, missing names) at load time.
- Search the vocabulary by substring for ingredient pickers.
- Resolve which catalog ingredients occur inside a piece of menu text.
"""
