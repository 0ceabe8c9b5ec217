"""Quiz generation service: cached context assembly and deduplicated AI calls."""
