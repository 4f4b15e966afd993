# Services package init
"""
Rhythm90 Backend — Services Layer
==================================

What:  Resource logic sitting between routes (HTTP) and the store (persistence).
Why:   Routes pick an operation; services build statements and shape results.
How:   Each service is stateless and receives the request's Store per call.

Service Inventory:
    - BoardService: plays, signals, RnR summary
    - UserService: current user, admin and premium checks, provider sign-in stubs
    - TeamService: admin team membership and team listing
    - FlagService: feature flag map and toggles
    - InviteService: invite issue and redemption
    - GrowthService: analytics events, waitlist, dashboard counters
    - NotificationService: in-app notification feed
    - PasswordResetService: reset token issue and redemption
    - DemoService: demo sign-in, seeding, demo-mode write skipping
    - AssistantService: marketing suggestions over an LLMService (GeminiService)
"""
