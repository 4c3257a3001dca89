"""Static site generator for folders of wikilinked markdown notes."""
