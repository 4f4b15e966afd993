# Routes package init
"""
Rhythm90 Backend — API Routes Package
======================================

What:  HTTP route handlers. Path and method together select exactly one
       handler; anything unmatched is a plain-text 404 (see main.py).

Route Inventory:
    - health.py:        /health (any method)
    - board.py:         GET/POST /board, GET/POST /signals, GET /rnr-summary
    - integrations.py:  POST /slack-hook
    - auth.py:          GET /demo/check, POST /auth/demo|google|microsoft
    - users.py:         GET/POST /me, GET /admin/check, GET /premium-content
    - admin.py:         GET /admin/team, POST /admin/team/add|remove, GET /admin/teams
    - flags.py:         GET/POST /feature-flags
    - invites.py:       POST /invite, GET/POST /accept-invite
    - growth.py:        POST /analytics, POST /waitlist, GET /dashboard-stats
    - notifications.py: GET /notifications, POST /create-sample-notifications
    - password.py:      POST /request-password-reset, POST /reset-password
    - assistant.py:     POST /ai-signal, POST /ai-hypothesis

Routes stay THIN: take the typed body, call one service, return its result.
"""
