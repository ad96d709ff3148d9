"""Terminal presentation: borders, board rendering, themes and the runtime."""
