"""Notification templates and the parameters each one is rendered with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from jinja2 import Environment, StrictUndefined, Template

ISSUE_COMMENT_TITLE = """
  {%- if value.type == 1 -%}
    回复:[{{ value.name }}]{{ value.title }}
  {%- elif value.type == 4 -%}
    打开:[{{ value.name }}]{{ value.title }}
  {%- elif value.type == 5 -%}
    关闭:[{{ value.name }}]{{ value.title }}
  {%- endif -%}
  """

ISSUE_COMMENT_TEMPLATE = """
  {%- if value.type == 1 -%}
    {{ value.content }}
  {%- elif value.type == 4 -%}
    打开了反馈
  {%- elif value.type == 5 -%}
    关闭了反馈
  {%- endif -%}
  <hr/>
  <a href="{{ config.url }}/script-show-page/{{ value.script_id }}/issue/{{ value.issue_id }}/comment#comment-{{ value.comment_id }}">点击查看原文</a><hr/>您可以在<a href="{{ config.url }}/users/notify">个人设置页面</a>中取消本邮件的通知,或者取消对该脚本反馈评论的关注
"""

ISSUE_CREATE_TITLE = "[{{ value.name }}]{{ value.title }}"
ISSUE_CREATE_TEMPLATE = """
  {{ value.content }}
  <hr/>
  <a href="{{ config.url }}/script-show-page/{{ value.script_id }}/issue/{{ value.issue_id }}/comment">点击查看原文</a><hr/>您可以在<a href="{{ config.url }}/users/notify">个人设置页面</a>中取消本邮件的通知,或者取消对该脚本反馈的关注
"""

SCRIPT_SCORE_TITLE = "收到评分:[{{ value.name }}]"
SCRIPT_SCORE_TEMPLATE = """
  {{ value.name }} 被 {{ value.username }} 评分为 {{ value.score }} 分
  <hr/>
  <a href="{{ config.url }}/script-show-page/{{ value.script_id }}/comment">点击查看</a><hr/>您可以在<a href="{{ config.url }}/users/notify">个人设置页面</a>中取消本邮件的通知
"""

SCRIPT_SCORE_REPLY_TITLE = "收到作者回复评分:[{{ value.name }}]"
SCRIPT_SCORE_REPLY_TEMPLATE = """
 在 {{ value.name }} 收到 脚本作者 回复消息 : 
  <hr/>
     {{ value.content }}
  <hr/>
  <a href="{{ config.url }}/script-show-page/{{ value.script_id }}/comment">点击查看</a><hr/>您可以在<a href="{{ config.url }}/users/notify">个人设置页面</a>中取消本邮件的通知
"""

SCRIPT_UPDATE_TITLE = "[{{ value.name }}]有新的版本:{{ value.version }}"
SCRIPT_UPDATE_TEMPLATE = """
脚本{{ value.name }}更新到{{ value.version }}版本
<hr/>
<a href="{{ config.url }}/script-show-page/{{ value.id }}">点击查看脚本页面</a><hr/>您可以在<a href="{{ config.url }}/users/notify">个人设置页面</a>中取消本邮件的通知,或者取消对该脚本的关注
"""

ACCESS_INVITE_TITLE = "邀请您加入脚本:{{ value.name }}"
ACCESS_INVITE_TEMPLATE = """
{{ value.username }}邀请您加入脚本:{{ value.name }}
<hr/>
<a href="{{ config.url }}/script/invite/?code={{ value.code }}">点击此链接加入</a>
"""


@dataclass
class IssueComment:
    script_id: int
    issue_id: int
    comment_id: int
    name: str
    title: str
    content: str
    type: int


@dataclass
class IssueCreate:
    script_id: int
    issue_id: int
    name: str
    title: str
    content: str


@dataclass
class ScriptScore:
    script_id: int
    name: str
    username: str
    score: int


@dataclass
class ScriptReplyScore:
    script_id: int
    name: str
    content: str


@dataclass
class ScriptUpdate:
    id: int
    name: str
    version: str


@dataclass
class AccessInvite:
    code: str
    name: str
    username: str


_ENVIRONMENT = Environment(
    autoescape=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


@lru_cache(maxsize=64)
def _compile(source: str) -> Template:
    return _ENVIRONMENT.from_string(source)


def render(source: str, data: Mapping[str, Any]) -> str:
    """Render a template with HTML escaping; missing values raise UndefinedError."""
    return _compile(source).render(**data)