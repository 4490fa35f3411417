"""Tree-sitter integration: grammars, parsers and the navigation toolkit."""
