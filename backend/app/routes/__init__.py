# Routes package init
"""
Postboard Backend — API Routes Package
========================================

Route Inventory:
    - posts.py:   GET    /posts            (list posts)
                  GET    /posts/{post_id}  (get one post)
                  POST   /posts            (create post)
                  PUT    /posts/{post_id}  (update post)
                  DELETE /posts/{post_id}  (delete post, authenticated)
    - health.py:  GET    /health           (service health check)

Routes are thin: extract request data, call PostService, wrap the result.
Persistence belongs in services, not routes.
"""
