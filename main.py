#!/usr/bin/env python3
"""
Roster Timeline - メインエントリーポイント

設定の読み込みとログシステムの初期化を行い、Streamlitアプリを起動します。
"""

import sys
import os
import traceback

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from roster.utils.config import get_config
from roster.utils.logger import setup_logging, get_logger


def main():
    """メイン関数"""
    try:
        # 設定を読み込み
        config = get_config()

        # ログシステムを初期化
        setup_logging()
        logger = get_logger(__name__)

        logger.info(f"{config.app_name} v{config.app_version} を起動しています...")
        logger.info(f"デバッグモード: {config.debug}")

        app_path = os.path.join(os.path.dirname(__file__), "src", "roster", "app", "streamlit_roster_app.py")
        if not os.path.exists(app_path):
            logger.error(f"アプリケーションファイルが見つかりません: {app_path}")
            sys.exit(1)

        import streamlit.web.cli as stcli

        logger.info(f"ブラウザで http://localhost:{config.streamlit_server_port} にアクセスしてください")
        sys.argv = [
            "streamlit", "run", app_path,
            f"--server.port={config.streamlit_server_port}",
            f"--server.address={config.streamlit_server_address}"
        ]
        sys.exit(stcli.main())

    except Exception as e:
        # エラーログを出力
        error_logger = get_logger("error")
        error_logger.error(f"アプリケーション起動エラー: {str(e)}")
        error_logger.error(f"詳細: {traceback.format_exc()}")

        print(f"エラーが発生しました: {str(e)}")
        print("詳細はログファイルを確認してください。")

        sys.exit(1)


if __name__ == "__main__":
    main()
