"""User-Agent values sent with HTTP requests."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import ClassVar

_PRESETS = (
    (
        "CHROME_WINDOWS",
        "ChromeWindows",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    ),
    (
        "CHROME_MAC",
        "ChromeMac",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    ),
    (
        "CHROME_LINUX",
        "ChromeLinux",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36",
    ),
    (
        "CHROME_ANDROID",
        "ChromeAndroid",
        "Mozilla/5.0 (Linux; Android 13; Pixel 6) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/114.0.0.0 Mobile Safari/537.36",
    ),
    (
        "FIREFOX_WINDOWS",
        "FirefoxWindows",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:114.0) Gecko/20100101 Firefox/114.0",
    ),
    (
        "FIREFOX_MAC",
        "FirefoxMac",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:114.0) Gecko/20100101 Firefox/114.0",
    ),
    (
        "FIREFOX_LINUX",
        "FirefoxLinux",
        "Mozilla/5.0 (X11; Linux x86_64; rv:114.0) Gecko/20100101 Firefox/114.0",
    ),
    (
        "EDGE_WINDOWS",
        "EdgeWindows",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36 Edg/114.0.0.0",
    ),
    (
        "EDGE_MAC",
        "EdgeMac",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36 Edg/114.0.0.0",
    ),
    (
        "SAFARI_MAC",
        "SafariMac",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/16.0 Safari/605.1.15",
    ),
    (
        "SAFARI_IOS",
        "SafariIOS",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 16_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/16.0 Mobile/15E148 Safari/604.1",
    ),
    (
        "OPERA_WINDOWS",
        "OperaWindows",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/120.0.0.0",
    ),
    (
        "OPERA_MAC",
        "OperaMac",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/120.0.0.0",
    ),
    (
        "OPERA_LINUX",
        "OperaLinux",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/120.0.0.0",
    ),
    (
        "OPERA_ANDROID",
        "OperaAndroid",
        "Mozilla/5.0 (Linux; Android 13; Pixel 6) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36 OPR/120.0.0.0",
    ),
    (
        "YANDEX_WINDOWS",
        "YandexWindows",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/114.0.0.0 YaBrowser/24.0.0.0 Safari/537.36",
    ),
    (
        "YANDEX_LINUX",
        "YandexLinux",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/114.0.0.0 YaBrowser/24.0.0.0 Safari/537.36",
    ),
    (
        "YANDEX_ANDROID",
        "YandexAndroid",
        "Mozilla/5.0 (Linux; Android 13; Pixel 6) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/114.0.0.0 YaBrowser/24.0.0.0 Mobile Safari/537.36",
    ),
)

# Desktop agents that random() picks from.
_DESKTOP = (
    "CHROME_WINDOWS",
    "CHROME_MAC",
    "CHROME_LINUX",
    "FIREFOX_WINDOWS",
    "FIREFOX_MAC",
    "FIREFOX_LINUX",
    "EDGE_WINDOWS",
    "EDGE_MAC",
    "OPERA_WINDOWS",
    "OPERA_MAC",
    "OPERA_LINUX",
    "YANDEX_WINDOWS",
    "YANDEX_LINUX",
)


@dataclass(frozen=True)
class User:
    """An HTTP User-Agent: one of the presets or a custom string."""

    agent: str
    name: str = "Custom"

    CHROME_WINDOWS: ClassVar[User]
    CHROME_MAC: ClassVar[User]
    CHROME_LINUX: ClassVar[User]
    CHROME_ANDROID: ClassVar[User]
    FIREFOX_WINDOWS: ClassVar[User]
    FIREFOX_MAC: ClassVar[User]
    FIREFOX_LINUX: ClassVar[User]
    EDGE_WINDOWS: ClassVar[User]
    EDGE_MAC: ClassVar[User]
    SAFARI_MAC: ClassVar[User]
    SAFARI_IOS: ClassVar[User]
    OPERA_WINDOWS: ClassVar[User]
    OPERA_MAC: ClassVar[User]
    OPERA_LINUX: ClassVar[User]
    OPERA_ANDROID: ClassVar[User]
    YANDEX_WINDOWS: ClassVar[User]
    YANDEX_LINUX: ClassVar[User]
    YANDEX_ANDROID: ClassVar[User]

    @classmethod
    def random(cls) -> User:
        """Return a randomly chosen desktop User-Agent."""
        return getattr(cls, _random.choice(_DESKTOP))

    @classmethod
    def custom(cls, agent: str) -> User:
        """Return a User carrying an arbitrary User-Agent string."""
        return cls(agent)

    def __str__(self) -> str:
        return self.agent


for _attr, _name, _agent in _PRESETS:
    setattr(User, _attr, User(_agent, _name))
del _attr, _name, _agent