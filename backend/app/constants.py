DEFAULTS = {
    # Cast file loaded into the graph at startup
    "CAST_FILE": "data/raw/nextBechdel_castGender.txt",
    # Classification value that marks a subgroup member
    "SUBGROUP_LABEL": "Female",
    # Zero-based column holding the collection (movie) name
    "COLLECTION_COLUMN": 0,
    # Zero-based column holding the participant (actor) name
    "PARTICIPANT_COLUMN": 1,
    # Zero-based column holding the subgroup classification
    "SUBGROUP_COLUMN": 5,
    # Field delimiter of the cast file
    "DELIMITER": ",",
    # Default diversity pass ratio when a request does not supply one
    "DIVERSITY_THRESHOLD": 0.5,
    # Where the runner writes the TGF export
    "TGF_PATH": "data/processed/castgraph.tgf",
    # Whether the runner writes the TGF export
    "EXPORT_ENABLED": True,
    # Participant pairs the runner reports separations for ("A|B" entries)
    "SEPARATION_PAIRS": [],
}
