# Routes package init
"""
CookHub Backend — API Routes Package
======================================

What:  HTTP route handlers. Each one pulls the Store from
       `Depends(get_store)`, calls a service, and returns its schema.

Route Inventory:
    - recipes.py:        GET/POST /api/recipes, GET /api/search,
                         GET /api/shopping-list
    - chefs.py:          GET/POST /api/chefs
    - masterclasses.py:  GET/POST /api/masterclasses, POST /api/enroll
    - users.py:          GET/POST /api/users, POST /api/subscribe,
                         GET /api/user-history, GET /api/user-subscriptions,
                         GET /api/recommendations
    - stats.py:          GET /api/stats
    - health.py:         GET /health
    - pages.py:          GET / and every unclaimed GET path (landing page)
    - body.py:           json_body() dependency for request bodies

Routes stay thin: query parameters arrive as raw strings and are validated
by the service, so a missing parameter and an empty one both answer 400.
Bodies are read with json_body(), which decodes JSON regardless of the
request's Content-Type.
"""
