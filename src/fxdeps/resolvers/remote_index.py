"""Resolver backed by the Maven Central search API (solrsearch)."""

import logging
import re
from typing import Any, Dict, List, Optional

from fxdeps.common.http_client import HttpTransport
from fxdeps.common.logging_utils import extra_context, is_debug_enabled
from fxdeps.constants import Constants
from fxdeps.versioning.models import ArtifactCoordinate, VersionSpec

from .base import RepositoryResolver

logger = logging.getLogger(__name__)

LATEST_PATTERN = re.compile(r"^(\d+\.)*(\*|\d+)$")
EARLY_ACCESS_PATTERN = re.compile(r"^(\d+\.)*(\d+-ea\+\d+)$")

NAMED_PATTERNS = {
    "latest": LATEST_PATTERN,
    "early": EARLY_ACCESS_PATTERN,
}


def build_query(group: str, artifact: str, spec: VersionSpec, classifier: Optional[str] = None) -> str:
    """Build the search expression.

    The version clause is only added for literal versions; special cases are
    filtered client-side because the index cannot match them.
    """
    clauses = [f"g:{group}", f"a:{artifact}"]
    if not spec.is_special_case and spec.raw:
        clauses.append(f"v:{spec.raw}")
    if classifier:
        clauses.append(f"l:{classifier}")
    return " AND ".join(clauses)


def select_candidate(token: Optional[str], candidates: List[ArtifactCoordinate]) -> Optional[ArtifactCoordinate]:
    """Pick the first candidate, in index order, matching the special-case token.

    ``latest`` keeps plain dotted numeric versions, ``early`` keeps ``-ea+N``
    builds, any other token is used as a regular expression searched in the
    version string. No token (or an empty one) takes the first candidate.

    Raises:
        re.error: If a custom token is not a valid regular expression.
    """
    if not candidates:
        return None
    if not token:
        return candidates[0]

    pattern = NAMED_PATTERNS.get(token)
    if pattern is None:
        # User-supplied pattern, matched as-is.
        pattern = re.compile(token)
    for candidate in candidates:
        if pattern.search(candidate.version):
            return candidate
    return None


class RemoteIndexResolver(RepositoryResolver):
    """Resolve artifacts through an HTTP/JSON search endpoint."""

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        search_url: Optional[str] = None,
        rows: Optional[int] = None,
    ):
        self._transport = transport or HttpTransport()
        self._search_url = search_url or Constants.SEARCH_URL
        self._rows = rows or Constants.SEARCH_ROWS

    @property
    def name(self) -> str:
        return "maven-central"

    @property
    def search_url(self) -> str:
        return self._search_url

    def _params(self, query: str) -> Dict[str, Any]:
        return {"q": query, "core": Constants.SEARCH_CORE, "rows": self._rows, "wt": "json"}

    def fetch_candidates(
        self, group: str, artifact: str, spec: VersionSpec, classifier: Optional[str] = None
    ) -> List[ArtifactCoordinate]:
        """Query the index and return candidate artifacts in index order.

        Returns an empty list for non-2xx statuses, zero hits or an unexpected
        envelope.

        Raises:
            TransportError: On network failure or malformed JSON.
        """
        query = build_query(group, artifact, spec, classifier)
        status_code, payload = self._transport.get_json(self._search_url, params=self._params(query))
        if not 200 <= status_code < 300 or not isinstance(payload, dict):
            logger.warning("Search for %s returned HTTP %s", query, status_code)
            return []

        response = payload.get("response") or {}
        if not isinstance(response, dict):
            return []
        docs = response.get("docs") or []
        if not isinstance(docs, list):
            logger.warning("Search for %s returned an unexpected docs field", query)
            return []
        found = response.get("numFound", len(docs))
        if is_debug_enabled(logger):
            logger.debug(
                "Search results",
                extra=extra_context(
                    event="search_results",
                    component="remote_index",
                    action="fetch_candidates",
                    query=query,
                    status=payload.get("status"),
                    num_found=found,
                    count=len(docs),
                ),
            )
        if not found:
            return []
        return [ArtifactCoordinate.from_doc(doc) for doc in docs if isinstance(doc, dict)]

    def resolve(
        self,
        group: str,
        artifact: str,
        spec: VersionSpec,
        classifier: Optional[str] = None,
    ) -> Optional[ArtifactCoordinate]:
        """Resolve one artifact; returns None when nothing matches.

        Raises:
            TransportError: On network failure or malformed JSON. The chain
                logs it and moves on to the next resolver.
        """
        candidates = self.fetch_candidates(group, artifact, spec, classifier)
        if not candidates:
            logger.info("No artifacts found for %s:%s (%s)", group, artifact, spec.raw)
            return None

        try:
            selected = select_candidate(spec.token, candidates)
        except re.error as exc:
            logger.error("Invalid version pattern %r: %s", spec.token, exc)
            return None

        if selected is None:
            logger.info("No %s:%s version matches %r", group, artifact, spec.raw)
            return None
        if spec.is_special_case:
            logger.info("Resolved special version %s -> %s", spec.token, selected.version)
        return selected
