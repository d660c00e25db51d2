"""测试公共夹具"""

import subprocess

import pytest


class FakeTmux:
    """替换 subprocess.run，记录 tmux 调用并返回预设输出"""

    def __init__(self):
        self.calls = []
        self.responses = {}
        self.fail_all = False
        self.missing = False

    def set(self, fmt: str, output: str, returncode: int = 0):
        self.responses[fmt] = (returncode, output)

    def __call__(self, cmd, capture_output=True, text=True, timeout=None):
        self.calls.append(list(cmd))
        if self.missing:
            raise FileNotFoundError(cmd[0])
        if self.fail_all:
            return subprocess.CompletedProcess(cmd, 1, '', 'no server running')
        if len(cmd) >= 4 and cmd[1] == 'display-message':
            returncode, output = self.responses.get(cmd[3], (1, ''))
            return subprocess.CompletedProcess(cmd, returncode, output + '\n', '')
        if cmd[1:] == ['-V']:
            return subprocess.CompletedProcess(cmd, 0, 'tmux 3.4\n', '')
        return subprocess.CompletedProcess(cmd, 0, '', '')

    def commands(self) -> list:
        """去掉 display-message 查询后的动作命令"""
        return [c[1:] for c in self.calls if c[1] != 'display-message']


@pytest.fixture
def fake_tmux(monkeypatch):
    fake = FakeTmux()
    monkeypatch.setattr('editmux.tmux_control.subprocess.run', fake)
    return fake
