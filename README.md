# scriptlist

Service-layer building blocks for a user-script hosting site. Each piece works
on values you pass in — request details, roles, version strings, counter
functions — so it can sit behind whatever storage and HTTP stack you use.

## Modules

- `scriptlist.gray_control` – staged ("gray") release rules that decide
  whether a request gets a given code version. A request is described by
  `RequestContext` (`header`, `cookie`, `set_cookie`).
  - `Cookie(regex)` matches when the regular expression is found in the
    request's `Cookie` header.
  - `PreRelease(is_pre_release)` matches exactly when the user opted into
    pre-releases.
  - `Weight(weight, weight_day)` lets through a percentage of visitors. A
    visitor's bucket comes from the `gray_weight` cookie; when the request has
    none, a random bucket is issued with `set_cookie` and the current request
    counts as bucket 0. With a non-zero `weight_day` the percentage ramps up
    over that many days after the version's `createtime`.
    `Weight.match_at(now, n, createtime)` is the decision for a given moment,
    bucket and creation time.
  - `And` matches when all its controls match (an empty one always matches),
    `Or` when any does (an empty one never matches); both have `append`.
- `scriptlist.templates` – the e-mail template texts (issue created, issue
  comment, score received, author reply to a score, script update, access
  invitation) as Jinja2 sources such as `ISSUE_CREATE_TITLE` and
  `SCRIPT_UPDATE_TEMPLATE`, with the parameter dataclasses `IssueCreate`,
  `IssueComment`, `ScriptScore`, `ScriptReplyScore`, `ScriptUpdate` and
  `AccessInvite`. `render(source, data)` renders with HTML escaping; the
  templates expect `value` (the parameters) and, for bodies, `config.url`.
  A missing value raises `jinja2.UndefinedError`.
- `scriptlist.access` – script roles (`admin`, `owner`, `manager`, `guest`)
  and the resource actions they grant. `role_to_access` merges the grants of
  several roles, `resolve_roles(is_admin, uid, owner_uid, fallback)` gives
  admin/owner or falls back to a lookup you supply and raises
  `RoleIsNilError` when no role is found, and `check` or `CheckAccess.check`
  raise `PermissionDenied` when a resource/action pair is not granted.
- `scriptlist.category` – `normalize_tags` splits tags on `", "`, trims and
  de-duplicates them in first-seen order; `diff_links(existing, wanted)`
  returns the category ids to remove and to add.
- `scriptlist.versions` – `parse_target_version` for targets such as
  `latest`, `pre-latest^2` or an exact version; `next_library_version` adds
  one to the last dot-separated part; `is_prerelease` for semantic versions;
  `code_changed` compares sources ignoring CRLF versus LF; `highest_role`
  picks the top role by a rank you give (guest when there are none).
- `scriptlist.webhook` – `verify_github_signature` checks a `sha256=` HMAC
  signature, `github_repository` reads the repository's full name from a
  payload, and `sync_prefixes` gives the raw and repository URL prefixes to
  find scripts by. Rejected requests raise `WebhookError`.
- `scriptlist.script_code` – `derive_tags` appends the background and
  scheduled-script tags implied by `@background` / `@crontab` metadata,
  `decode_meta` reads stored metadata JSON of user scripts, and `select_code`
  walks gray-release entries (`target_version` plus `controls` of type
  `weight`, `cookie` or `pre-release`) to choose the version to serve, using
  lookup functions you provide.
- `scriptlist.statistics` – `days_chart`, `realtime_chart` and `overview`
  build `Chart` and `Overview` values from counter functions you supply;
  failing counters count as zero.
- `scriptlist.fetch` – `fetch_url(url, timeout)` returns the body of a URL as
  text whatever the status code; a malformed URL raises `ValueError`, a failed
  request `OSError`.

## Example

```python
from scriptlist.category import normalize_tags
from scriptlist.access import check, PermissionDenied

tags = normalize_tags(["tools, video", " video "])   # ["tools", "video"]

try:
    check(["guest"], "script", "write")
except PermissionDenied:
    print("guests may not change scripts")
```

## What the package does not do

It has no web server, no database or cache layer and no command to run. It
renders notification texts but does not send them: there is no mail sender
and no per-user notification settings. Storage lookups, sessions and delivery
are left to the code that uses these modules.

## Requirements

Python 3.10 or later, and Jinja2 for template rendering.