class StandingsFetchError(Exception):
    """Sollevata quando il feed classifica non risponde, risponde con status non 2xx o JSON non valido."""
