"""
例外定義モジュール

ロスター・エンジンが送出する例外を定義します。
どちらも呼び出し側で回復可能な例外で、送出時にストアは変更されません。
"""


class RosterError(Exception):
    """ロスター・エンジンの基底例外"""


class InvalidRangeError(RosterError, ValueError):
    """行インデックスまたは範囲がタイムライン外、もしくは start >= end"""


class NotFoundError(RosterError, LookupError):
    """参照された従業員IDまたはタスクIDが存在しない"""
