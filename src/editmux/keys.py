"""按键路由

显式的按键 -> 动作映射，由宿主持有。install() 返回的令牌用于
restore() 时原样恢复之前的绑定（包括"未绑定"）。
"""

import logging
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

Action = Callable[[], object]


def normalize_key(key: str) -> str:
    """合并多余空白：'C-c  t' -> 'C-c t'"""
    return ' '.join(key.split())


class KeyRouter:
    """按键路由表"""

    def __init__(self, bindings: Optional[Dict[str, Action]] = None):
        self._bindings: Dict[str, Action] = {}
        for key, action in (bindings or {}).items():
            self.bind(key, action)

    def bind(self, key: str, action: Optional[Action]) -> Optional[Action]:
        """绑定按键，action 为 None 表示解绑

        Returns:
            之前的绑定
        """
        key = normalize_key(key)
        if not key:
            raise ValueError("按键不能为空")
        previous = self._bindings.get(key)
        if action is None:
            self._bindings.pop(key, None)
        else:
            self._bindings[key] = action
        return previous

    def lookup(self, key: str) -> Optional[Action]:
        return self._bindings.get(normalize_key(key))

    def dispatch(self, key: str) -> bool:
        """执行按键对应的动作

        Returns:
            是否存在绑定
        """
        action = self.lookup(key)
        if action is None:
            logger.debug(f"[按键] 未绑定: {key}")
            return False
        action()
        return True

    def bindings(self) -> Dict[str, Action]:
        return dict(self._bindings)

    def install(self, bindings: Dict[str, Action]) -> Dict[str, Optional[Action]]:
        """批量绑定

        Returns:
            恢复令牌：按键 -> 之前的绑定
        """
        token: Dict[str, Optional[Action]] = {}
        for key, action in bindings.items():
            key = normalize_key(key)
            if key not in token:
                token[key] = self._bindings.get(key)
            self.bind(key, action)
        logger.debug(f"[按键] 已安装: {list(token)}")
        return token

    def restore(self, token: Dict[str, Optional[Action]]) -> None:
        """恢复 install() 之前的绑定"""
        for key, previous in token.items():
            self.bind(key, previous)
        logger.debug(f"[按键] 已恢复: {list(token)}")
