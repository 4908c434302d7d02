"""
Bundled keyword sets from the browser address-bar intervention tips.

Each document is one tip ("clear" history/cache, "refresh" the browser,
"update" the browser); its phrases are the searches that should surface it.
"""

from typing import Dict, List

from .scorer import create_scorer

DOCUMENTS: Dict[str, List[str]] = {
    "clear": [
        "cache firefox",
        "clear cache firefox",
        "clear cache in firefox",
        "clear cookies firefox",
        "clear firefox cache",
        "clear history firefox",
        "cookies firefox",
        "delete cookies firefox",
        "delete history firefox",
        "firefox cache",
        "firefox clear cache",
        "firefox clear cookies",
        "firefox clear history",
        "firefox cookie",
        "firefox cookies",
        "firefox delete cookies",
        "firefox delete history",
        "firefox history",
        "firefox not loading pages",
        "history firefox",
        "how to clear cache",
        "how to clear history",
    ],
    "refresh": [
        "firefox crashing",
        "firefox keeps crashing",
        "firefox not responding",
        "firefox not working",
        "firefox refresh",
        "firefox slow",
        "how to reset firefox",
        "refresh firefox",
        "reset firefox",
    ],
    "update": [
        "download firefox",
        "download mozilla",
        "firefox browser",
        "firefox download",
        "firefox for mac",
        "firefox for windows",
        "firefox free download",
        "firefox install",
        "firefox installer",
        "firefox latest version",
        "firefox mac",
        "firefox quantum",
        "firefox update",
        "firefox version",
        "firefox windows",
        "get firefox",
        "how to update firefox",
        "install firefox",
        "mozilla download",
        "mozilla firefox 2019",
        "mozilla firefox 2020",
        "mozilla firefox download",
        "mozilla firefox for mac",
        "mozilla firefox for windows",
        "mozilla firefox free download",
        "mozilla firefox mac",
        "mozilla firefox update",
        "mozilla firefox windows",
        "mozilla update",
        "update firefox",
        "update mozilla",
        "www.firefox.com",
    ],
}

# "fire fox", "fox fire" and "foxfire" are read as "firefox". "mozila" also
# catches "mozzila" and "mozzilla" within the default threshold of 1.
VARIATIONS: Dict[str, List[str]] = {
    "firefox": ["fire fox", "fox fire", "foxfire"],
    "mozilla": ["mozila"],
}


def build_default_scorer(mode: str = "phrase", **kwargs):
    """Scorer preloaded with DOCUMENTS and VARIATIONS."""
    kwargs.setdefault("variations", VARIATIONS)
    scorer = create_scorer(mode, **kwargs)
    scorer.add_documents(DOCUMENTS)
    return scorer
