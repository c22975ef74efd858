"""FlashyCardy: flashcard decks with translation and British history lookups."""
