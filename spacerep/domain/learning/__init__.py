"""Learning domain: decks, cards, reviews and review scheduling."""
