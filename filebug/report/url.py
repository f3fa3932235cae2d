from dataclasses import dataclass
from urllib.parse import quote, urlsplit, urlunsplit

from toolz import pipe
from toolz.curried import filter, map

from ..config.config import DEFAULTS_CONFIG
from .report import IssueReport


@dataclass(frozen=True)
class TrackerTemplate:
    base_url: str
    title_param: str = "title"
    body_param: str = "body"


DEFAULT_TRACKER = TrackerTemplate(DEFAULTS_CONFIG["tracker_url"])


def render_body(report: IssueReport) -> str:
    return pipe(
        report.sections(),
        filter(lambda section: section[1] is not None),
        map(lambda section: f"### {section[0]}\n{section[1]}"),
        "\n\n".join,
    )  # type: ignore


def encode_query_value(value: str) -> str:
    # safe="" so that "/" and "+" are escaped too; unquote() and parse_qs() both recover the input.
    # Lone surrogates from undecodable argv or stdin bytes are emitted as the original byte
    try:
        return quote(value, safe="", errors="surrogateescape")
    except UnicodeEncodeError:
        # surrogates outside the escape range, e.g. from broken UTF-16 input
        return quote(value, safe="", errors="surrogatepass")


def build_issue_url(report: IssueReport, template: TrackerTemplate = DEFAULT_TRACKER) -> str:
    """
    Build the tracker's pre-filled "new issue" URL for a report.

    The title and body are encoded independently and appended, in that order, to the base URL. If
    the base URL already has a query string, the parameters are added to it. A fragment on the base
    URL is dropped, since anything after it would never reach the tracker.

    Args:
        report: The report to encode
        template: Base URL and query parameter names of the tracker

    Returns:
        The full URL
    """
    query = "&".join(
        [
            f"{template.title_param}={encode_query_value(report.title)}",
            f"{template.body_param}={encode_query_value(render_body(report))}",
        ]
    )

    base = urlsplit(template.base_url)
    existing_query = base.query.strip("&")
    if existing_query:
        query = f"{existing_query}&{query}"
    return urlunsplit(base._replace(query=query, fragment=""))
