"""
アプリケーション層

Streamlitによるロスター編集画面を提供します。
"""
