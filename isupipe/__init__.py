"""ISUPipe API: livestream tags, reactions, themes and statistics."""
