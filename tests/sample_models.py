"""テスト用の注釈付きモデル."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from dbobjgen import DBColumn, Long, db_object


@db_object(latest_version=2)
@dataclass
class User:
    """ユーザー."""

    mUserId: Annotated[Long, DBColumn(primary="true")] = Long(0)
    mUserName: Annotated[str, DBColumn("user_name", allow_null="false")] = ""
    mAge: Annotated[int, DBColumn("age")] = 0
    mMarried: Annotated[bool, DBColumn("married")] = False
    mScore: Annotated[float, DBColumn("score", version=2)] = 0.0


@db_object
class Note:
    """注釈付きの通常クラス."""

    mTitle: Annotated[str, DBColumn()]
    mTags: Annotated[list[str], DBColumn()]
    mCached: int


class Undecorated:
    """@db_object なし（discover の対象外）."""

    mValue: Annotated[int, DBColumn()]
