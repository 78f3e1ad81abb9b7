# Services package init
"""
CookHub Backend — Services Layer
==================================

What:  Business logic sitting between routes (HTTP) and the Store (persistence).
How:   Each service method receives the Store, opens one session, runs its
       query (or two), and returns response schemas. SQL failures are logged
       with context and re-raised as DatabaseError.

Service Inventory:
    - RecipeService:          list / create / search recipes, shopping list
    - CatalogService:         chefs, users, master classes (list / create)
    - ActivityService:        subscribe, enroll (capacity check), history,
                              subscriptions of a user
    - RecommendationService:  future master classes filtered by a user's
                              subscriptions and preferences
    - StatsService:           platform row counts
"""
