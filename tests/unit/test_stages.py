"""
流水线阶段单元测试

每个模块完成后必须运行：pytest tests/unit/test_stages.py -v
"""

from cargo_wix.interfaces import ErrorKind
from cargo_wix.pipeline import INSTALLER_STAGES, StageEnum


class TestStages:
    """阶段定义测试"""

    def test_stage_order(self):
        """测试阶段顺序固定"""
        assert [s.name for s in INSTALLER_STAGES] == [
            StageEnum.BUILD.value,
            StageEnum.COMPILE.value,
            StageEnum.LINK.value,
            StageEnum.SIGN.value,
        ]

    def test_stage_error_kind(self):
        """测试阶段与错误类别对应"""
        kinds = {s.name: s.error_kind for s in INSTALLER_STAGES}
        assert kinds == {
            "BUILD": ErrorKind.BUILD,
            "COMPILE": ErrorKind.COMPILE,
            "LINK": ErrorKind.LINK,
            "SIGN": ErrorKind.SIGN,
        }

    def test_only_sign_is_optional(self):
        assert [s.name for s in INSTALLER_STAGES if s.optional] == ["SIGN"]

    def test_failure_messages(self):
        """测试固定诊断信息"""
        messages = {s.name: str(s.failure()) for s in INSTALLER_STAGES}
        assert messages["BUILD"] == "Failed to build the release executable"
        assert messages["COMPILE"] == "Failed to compile the installer"
        assert messages["LINK"] == "Failed to link the installer"
        assert messages["SIGN"] == "Failed to sign the installer"
