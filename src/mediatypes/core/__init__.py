from __future__ import annotations


class NotSet: ...


NOT_SET = NotSet()
