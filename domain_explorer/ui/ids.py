from __future__ import annotations

__all__ = ["IDs", "domain_card_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        PAGINATION = "pagination-state"
        SELECTION = "selection-state"
        SEMANTIC_KEYWORDS = "semantic-keywords"
        CORPUS_VERSION = "corpus-version"

    class Control:
        # Navbar
        NAVBAR_CORPUS_BADGE = "navbar-corpus-badge"

        # Filter panel
        FILTER_SUMMARY = "filter-summary"
        FILTER_PROGRESS = "filter-progress"
        MIN_LENGTH = "min-length-input"
        MAX_LENGTH = "max-length-input"
        EXTENSION_SELECT = "extension-select"
        DIGITS_SELECT = "digits-select"
        PREFIX_INPUT = "prefix-input"
        SEARCH_INPUT = "search-input"
        FIRST_LETTER_SELECT = "first-letter-select"
        RESET_FILTERS_BTN = "reset-filters-btn"

        # Semantic search
        SEMANTIC_INPUT = "semantic-input"
        SEMANTIC_BTN = "semantic-btn"
        SEMANTIC_CLEAR_BTN = "semantic-clear-btn"
        SEMANTIC_KEYWORDS_LIST = "semantic-keywords-list"

        # Corpus loading
        CORPUS_ERROR = "corpus-error"
        CORPUS_ERROR_MESSAGE = "corpus-error-message"
        CORPUS_RETRY_BTN = "corpus-retry-btn"
        CORPUS_UPLOAD = "corpus-upload"
        CORPUS_UPLOAD_STATUS = "corpus-upload-status"
        CORPUS_LOADING = "corpus-loading"

        # Results
        STATS_GRAPH = "stats-graph"
        RESULTS_COUNT = "results-count"
        RESULTS_GRID = "results-grid"
        RESULTS_EMPTY = "results-empty"
        EMPTY_RESET_BTN = "empty-reset-btn"
        PAGE_LABEL = "page-label"
        PAGE_PREV_BTN = "page-prev-btn"
        PAGE_NEXT_BTN = "page-next-btn"
        PAGE_PREV_BOTTOM_BTN = "page-prev-bottom-btn"
        PAGE_NEXT_BOTTOM_BTN = "page-next-bottom-btn"
        PAGE_SIZE_SELECT = "page-size-select"

        # Selection bar
        SELECTION_BAR = "selection-bar"
        SELECTION_COUNT = "selection-count"
        SELECTION_CLEAR_BTN = "selection-clear-btn"
        SELECTION_CONFIRM_CLEAR = "selection-confirm-clear"
        SELECTION_DOWNLOAD_BTN = "selection-download-btn"
        SELECTION_DOWNLOAD = "selection-download"

    class Pattern:
        # pattern-matching "type" strings
        DOMAIN_CARD = "domain-card"


def domain_card_id(domain: str) -> dict:
    return {"type": IDs.Pattern.DOMAIN_CARD, "index": domain}
