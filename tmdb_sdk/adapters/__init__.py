"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ :
- api/ : Transport httpx et orchestration cache / requêtes (TMDBClient)
- cache/ : Backends de cache (fichiers, Redis, diskcache, mémoire)
- endpoints/ : Groupes d'endpoints TMDB (movie, discover, keyword, search)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
