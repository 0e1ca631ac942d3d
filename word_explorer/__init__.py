"""Word Explorer – rhymes and similar words from Datamuse."""
