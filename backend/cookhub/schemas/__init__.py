# Schemas package init
"""
CookHub Backend — Pydantic Request/Response Schemas
=====================================================

Request models accept partial bodies: every field has a zero-value default,
so a create call stores whatever the caller provided. Only bodies that are
not JSON, or carry a field of the wrong type, are rejected (400).

    recipe.py    Recipe create/response, shopping list
    catalog.py   Chef, User, MasterClass create/response
    activity.py  Subscribe/enroll bodies, history, user subscriptions, stats
    common.py    Error, status and health envelopes
"""
