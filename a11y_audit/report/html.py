"""Static HTML summary of an audit result."""

from collections.abc import Mapping, Sequence

from a11y_audit.config import RunConfig
from a11y_audit.errors import RenderError
from a11y_audit.models.result import AffectedNode, AuditResult, Finding, Selector
from a11y_audit.report.markup import Element, Raw, el, render_document

IMPACT_BADGES: Mapping[str, str] = {
    "minor": "impact-minor",
    "moderate": "impact-moderate",
    "serious": "impact-serious",
    "critical": "impact-critical",
}

TARGET_DELIMITER = ", "
# axe-core chains selectors across shadow roots and iframes
SELECTOR_CHAIN_DELIMITER = " >>> "

NO_VIOLATIONS_MESSAGE = "🎉 No accessibility violations found!"
NO_INCOMPLETE_MESSAGE = "No incomplete tests"
NO_PASSES_MESSAGE = "No tests passed"
PASSES_IN_JSON_MESSAGE = "All passed tests are listed in the JSON report"

STYLESHEET = Raw("""
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      max-width: 1200px;
      margin: 0 auto;
      padding: 20px;
      line-height: 1.6;
    }
    .header { background: #f8f9fa; padding: 20px; border-radius: 8px; margin-bottom: 30px; }
    .summary {
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
      gap: 20px;
      margin-bottom: 30px;
    }
    .summary-card {
      background: #fff;
      border: 1px solid #dee2e6;
      border-radius: 8px;
      padding: 20px;
      text-align: center;
      box-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }
    .summary-card.violations { border-left: 4px solid #dc3545; }
    .summary-card.passes { border-left: 4px solid #28a745; }
    .summary-card.incomplete { border-left: 4px solid #ffc107; }
    .summary-card.inapplicable { border-left: 4px solid #6c757d; }
    .summary-card h3 { margin: 0 0 10px 0; color: #495057; }
    .summary-card .count { font-size: 2em; font-weight: bold; }
    .violations .count { color: #dc3545; }
    .passes .count { color: #28a745; }
    .incomplete .count { color: #f0ad4e; }
    .inapplicable .count { color: #6c757d; }
    .section { margin-bottom: 40px; border: 1px solid #dee2e6; border-radius: 8px; overflow: hidden; }
    .section-header {
      background: #f8f9fa;
      padding: 15px 20px;
      border-bottom: 1px solid #dee2e6;
      font-size: 1.2em;
      font-weight: bold;
    }
    .section-header.violations { background: #f8d7da; color: #721c24; }
    .section-header.passes { background: #d4edda; color: #155724; }
    .section-header.incomplete { background: #fff3cd; color: #856404; }
    .violation-item, .incomplete-item { padding: 20px; border-bottom: 1px solid #dee2e6; }
    .violation-item:last-child, .incomplete-item:last-child { border-bottom: none; }
    .finding-id { font-weight: bold; color: #dc3545; margin-bottom: 8px; }
    .finding-description { margin-bottom: 12px; color: #495057; }
    .violation-impact {
      display: inline-block;
      padding: 4px 8px;
      border-radius: 4px;
      font-size: 0.9em;
      font-weight: bold;
      text-transform: uppercase;
    }
    .impact-critical { background: #dc3545; color: white; }
    .impact-serious { background: #fd7e14; color: white; }
    .impact-moderate { background: #ffc107; color: #212529; }
    .impact-minor { background: #20c997; color: white; }
    .nodes { margin-top: 15px; background: #f8f9fa; padding: 15px; border-radius: 4px; }
    .node {
      font-family: 'Monaco', 'Courier New', monospace;
      font-size: 0.9em;
      margin-bottom: 8px;
      padding: 8px;
      background: white;
      border-left: 3px solid #dc3545;
    }
    .node code { white-space: pre-wrap; word-break: break-all; }
    .help-url { color: #007bff; text-decoration: none; }
    .help-url:hover { text-decoration: underline; }
    .timestamp { color: #6c757d; font-size: 0.9em; }
    .no-items { padding: 40px; text-align: center; color: #6c757d; font-style: italic; }
""")


def impact_badge_class(finding: Finding) -> str:
    """Return the badge class for a violation's impact.

    Raises:
        RenderError: If the impact is missing or not a known severity

    """
    badge = IMPACT_BADGES.get(finding.impact or "")
    if badge is None:
        raise RenderError(
            f"Violation {finding.id!r} has unrecognized impact {finding.impact!r}; "
            f"expected one of {', '.join(IMPACT_BADGES)}"
        )
    return badge


def format_target(target: Sequence[Selector]) -> str:
    """Join a node's selectors into one line."""
    return TARGET_DELIMITER.join(
        selector
        if isinstance(selector, str)
        else SELECTOR_CHAIN_DELIMITER.join(selector)
        for selector in target
    )


def help_link(finding: Finding, text: str) -> Element:
    """Link to the rule documentation, opened in a new tab."""
    return el(
        "p",
        el(
            "a",
            text,
            href=finding.help_url,
            class_name="help-url",
            target="_blank",
            rel="noopener",
        ),
    )


def summary_card(category: str, label: str, count: int, caption: str) -> Element:
    """Render one count card of the summary grid."""
    return el(
        "div",
        el("h3", label),
        el("div", str(count), class_name="count"),
        el("p", caption),
        class_name=f"summary-card {category}",
    )


def section(category: str, title: str, *body: Element) -> Element:
    """Wrap body elements in a titled report section."""
    return el(
        "div",
        el("div", title, class_name=f"section-header {category}"),
        *body,
        class_name="section",
    )


def no_items(message: str) -> Element:
    """Empty-state placeholder for a section."""
    return el("div", message, class_name="no-items")


def render_node_detail(node: AffectedNode) -> Element:
    """Render an affected element; the issue line is omitted without a summary."""
    return el(
        "div",
        el("strong", "Target:"),
        " ",
        format_target(node.target),
        el("br"),
        el("strong", "HTML:"),
        " ",
        el("code", node.html),
        el("br"),
        [el("strong", "Issue:"), " ", node.failure_summary]
        if node.failure_summary
        else None,
        class_name="node",
    )


def render_violation(violation: Finding) -> Element:
    """Render a violation with its impact badge and affected elements.

    Raises:
        RenderError: If the impact is not a known severity

    """
    badge = impact_badge_class(violation)
    return el(
        "div",
        el("div", violation.id, class_name="finding-id"),
        el("div", violation.description, class_name="finding-description"),
        el("span", violation.impact, class_name=f"violation-impact {badge}"),
        el(
            "div",
            el("strong", f"Affected elements ({len(violation.nodes)}):"),
            [render_node_detail(node) for node in violation.nodes],
            class_name="nodes",
        ),
        help_link(violation, "Learn more about this rule"),
        class_name="violation-item",
    )


def render_incomplete(finding: Finding) -> Element:
    """Render a finding that needs manual review."""
    return el(
        "div",
        el("div", finding.id, class_name="finding-id"),
        el("div", finding.description, class_name="finding-description"),
        el("p", el("strong", "Manual review required")),
        help_link(finding, "Learn more"),
        class_name="incomplete-item",
    )


def render_html(result: AuditResult, timestamp: str, config: RunConfig) -> str:
    """Render the HTML report for an audit result.

    Every piece of text coming from the result or the configuration is
    escaped. Rendering is deterministic for a given result and timestamp.

    Args:
        result: Rule engine result
        timestamp: Generation time shown in the header
        config: Run configuration (tested URL, standards label)

    Returns:
        Complete HTML document

    Raises:
        RenderError: If a violation carries an unknown impact

    """
    counts = result.counts()

    violations_body = (
        [render_violation(v) for v in result.violations]
        if result.violations
        else [no_items(NO_VIOLATIONS_MESSAGE)]
    )
    incomplete_body = (
        [render_incomplete(item) for item in result.incomplete]
        if result.incomplete
        else [no_items(NO_INCOMPLETE_MESSAGE)]
    )
    passes_body = no_items(
        PASSES_IN_JSON_MESSAGE if result.passes else NO_PASSES_MESSAGE
    )

    head = el(
        "head",
        el("meta", charset="UTF-8"),
        el("meta", name="viewport", content="width=device-width, initial-scale=1.0"),
        el("title", "Accessibility Test Report"),
        el("style", STYLESHEET),
    )
    body = el(
        "body",
        el(
            "div",
            el("h1", "🔍 Accessibility Test Report"),
            el("p", f"Generated: {timestamp}", class_name="timestamp"),
            el("p", el("strong", "Test URL:"), " ", config.url),
            el("p", el("strong", "Standards:"), " ", config.standards_label),
            class_name="header",
        ),
        el(
            "div",
            summary_card("violations", "Violations", counts.violations, "Issues found"),
            summary_card("passes", "Passes", counts.passes, "Tests passed"),
            summary_card("incomplete", "Incomplete", counts.incomplete, "Needs review"),
            summary_card(
                "inapplicable",
                "Not Applicable",
                counts.inapplicable,
                "Rules not relevant",
            ),
            class_name="summary",
        ),
        section(
            "violations", f"🚨 Violations ({counts.violations})", *violations_body
        ),
        section(
            "incomplete",
            f"⚠️ Incomplete Tests ({counts.incomplete})",
            *incomplete_body,
        ),
        section("passes", f"✅ Passed Tests ({counts.passes})", passes_body),
    )
    return render_document(head, body)
