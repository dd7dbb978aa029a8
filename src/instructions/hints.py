from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

PULL_REQUESTS_INSTRUCTIONS = """## Pull Requests

PR review workflow: Always use 'pull_request_review_write' with method 'create' to create a pending review, then 'add_comment_to_pending_review' to add comments, and finally 'pull_request_review_write' with method 'submit_pending' to submit the review for complex reviews with line-specific comments."""

ISSUES_INSTRUCTIONS = """## Issues

Check 'list_issue_types' first for organizations to use proper issue types. Use 'search_issues' before creating new issues to avoid duplicates. Always set 'state_reason' when closing issues."""

DISCUSSIONS_INSTRUCTIONS = """## Discussions
\t\t
Use 'list_discussion_categories' to understand available categories before creating discussions. Filter by category for better organization."""

PROJECTS_INSTRUCTIONS = """## Projects

Read Tools:
\t- list_projects
\t- get_project
\t- list_project_fields
\t- get_project_field
\t- list_project_items
\t- get_project_item
Write Tools:
\t- add_project_item
\t- update_project_item
\t- delete_project_item

Field usage:
\t- Call list_project_fields first to understand available fields and get IDs/types before filtering.
\t- Use EXACT returned field names (case-insensitive match). Don't invent names or IDs.
\t- Iteration synonyms (sprint/cycle/iteration) only if that field exists; map to the actual name (e.g. sprint:@current).
\t- Only include filters for fields that exist and are relevant.

Pagination (mandatory):
\tForward (normal) flow:
\t- Loop while pageInfo.hasNextPage=true using after=pageInfo.nextCursor.
\t- Keep query, fields, per_page IDENTICAL on every page.
\tBackward (rare) flow:
\t- Use before=pageInfo.prevCursor only when explicitly navigating to a previous page.
\tParameters:
\t- per_page: results per page (max 50). Choose a stable value; do not change mid-sequence.
\t- after: forward cursor from prior response (pageInfo.nextCursor).
\t- before: backward cursor from prior response (pageInfo.prevCursor); seldom needed.

Fields parameter:
\t- Include field IDs on EVERY paginated list_project_items call if you need values. Omit → title only.

Counting rules:
\t- Count items array length after full pagination.
\t- If multi-page: collect all pages, dedupe by item.id (fallback node_id) before totals.
\t- Never count field objects, content, or nested arrays as separate items.
\t- item.id = project item ID (for updates/deletes). item.content.id = underlying issue/PR ID.

Summary vs list:
\t- Summaries ONLY if user uses verbs: analyze | summarize | summary | report | overview | insights.
\t- Listing verbs (list/show/get/fetch/display/enumerate) → enumerate + total.

Examples:
\t- list_projects: "roadmap is:open"
\t- list_project_items: state:open is:issue sprint:@current priority:high updated:>@today-7d

Self-check before returning:
\t- Paginated fully
\t- Dedupe by id/node_id
\t- Correct IDs used
\t- Field names valid
\t- Summary only if requested.

Return COMPLETE data or state what's missing (e.g. pages skipped)."""

TOOLSET_INSTRUCTIONS: Mapping[str, str] = MappingProxyType(
    {
        "pull_requests": PULL_REQUESTS_INSTRUCTIONS,
        "issues": ISSUES_INSTRUCTIONS,
        "discussions": DISCUSSIONS_INSTRUCTIONS,
        "projects": PROJECTS_INSTRUCTIONS,
    }
)


def get_toolset_instructions(toolset: str) -> str | None:
    return TOOLSET_INSTRUCTIONS.get(toolset)


def known_toolsets() -> list[str]:
    return sorted(TOOLSET_INSTRUCTIONS)
