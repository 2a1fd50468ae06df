"""Plain-text document client."""

from __future__ import annotations

from LawSearch.sources.http import RetryingHttpClient
from LawSearch.utils.log import log


class TextApiClient(RetryingHttpClient):
    """Fetch the full text of one document.

    Any failure propagates; the matcher treats it as "document unavailable"
    and skips the document.
    """

    accept = "text/plain,*/*;q=0.8"

    def fetch_text(self, url: str) -> str:
        """Return the decoded body of ``url``.

        Args:
            url: Absolute URL of a ``.txt`` document.

        Returns:
            Document text. Served without a charset, bodies are decoded as
            UTF-8 rather than the HTTP default of ISO-8859-1.
        """
        response = self._get(url)
        if not response.encoding or "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        text = response.text
        log.debug("Text fetched: url=%s chars=%d", url, len(text))
        return text
