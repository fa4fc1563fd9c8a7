import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_RUNTIME = _lambda.Runtime.PYTHON_3_13

# (コマンド名, ターゲット指定オプション) の優先順
_INSTALLERS: tuple[tuple[list[str], str], ...] = (
    (["uv", "pip", "install"], "--target"),
    (["pip", "install"], "-t"),
)


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存パッケージをインストールする Bundling クラス"""

    def __init__(
        self, source_path: str, requirements_file: str = "requirements.txt"
    ) -> None:
        self.source_path = source_path
        self.requirements_file = requirements_file

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Args:
            output_dir: 出力先ディレクトリ
            options: BundlingOptions（未使用だが必須）

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / self.requirements_file
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements file not found: %s", requirements_path)
            return False

        for command, target_option in _INSTALLERS:
            if self._install(command, target_option, requirements_path, target_dir):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _install(
        self,
        command: list[str],
        target_option: str,
        requirements_path: Path,
        target_dir: Path,
    ) -> bool:
        """指定したインストーラでインストールを試行する。"""
        name = command[0]
        try:
            logger.info("Trying local bundling with %s...", name)
            subprocess.run(
                [
                    *command,
                    "-r",
                    str(requirements_path),
                    target_option,
                    str(target_dir),
                    "--quiet",
                ],
                check=True,
            )
        except FileNotFoundError:
            logger.debug("%s not found", name)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", name, e)
            return False

        logger.info("Local bundling with %s succeeded", name)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    ハンドラが使う powertools / pydantic を共通レイヤーとして配布する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        layer_source_path: str = "layers/common_layer",
    ) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                layer_source_path,
                bundling=BundlingOptions(
                    image=LAYER_RUNTIME.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(layer_source_path),
                ),
            ),
            compatible_runtimes=[LAYER_RUNTIME],
            description="Hotel API runtime dependencies",
        )
