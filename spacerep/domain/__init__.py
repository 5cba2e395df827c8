"""
Domain layer.

Core study model of the application: users, decks, cards, reviews and the
scheduling rules that decide when each card comes back. Nothing in here
talks to the database or the web framework.
"""
