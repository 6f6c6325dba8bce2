# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

# 版本号，token 的前三个字符
VERSION_007 = "007"
VERSION_006 = "006"
VERSION_LENGTH = 3

# App ID / App Certificate 均为 32 位十六进制字符串
APP_ID_LENGTH = 32

# v007 token 默认有效期（秒）
DEFAULT_EXPIRE_SECONDS = 900

# v006 Message 的时间戳 = 签发时间 + 24h
LEGACY_MESSAGE_TTL = 24 * 3600

# salt 取值范围 [1, SALT_MAX]
SALT_MAX = 99999999

# uid 取值范围 [1, UID_MAX]，account 长度范围 [1, ACCOUNT_MAX_LENGTH]
UID_MAX = 4294967295
ACCOUNT_MAX_LENGTH = 255

# 日志级别
LOG_LEVEL = "info"
