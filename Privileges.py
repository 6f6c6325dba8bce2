# Copyright (2025) Beijing Volcano Engine Technology Ltd.
# SPDX-License-Identifier: MIT

# Privilege codes, scoped per service. The same code means different things
# in different services, so always pair it with the service it is added to.

# RTC
RTC_JOIN_CHANNEL = 1
RTC_PUBLISH_AUDIO_STREAM = 2
RTC_PUBLISH_VIDEO_STREAM = 3
RTC_PUBLISH_DATA_STREAM = 4

# RTM
RTM_LOGIN = 1

# FPA
FPA_LOGIN = 1

# Chat
CHAT_USER = 1
CHAT_APP = 2

# Apaas
APAAS_ROOM_USER = 1
APAAS_USER = 2
APAAS_APP = 3

# v006 privilege names
kJoinChannel = 1
kPublishAudioStream = 2
kPublishVideoStream = 3
kPublishDataStream = 4
kRtmLogin = 1000

LEGACY_PRIVILEGES = {
    "kJoinChannel": kJoinChannel,
    "kPublishAudioStream": kPublishAudioStream,
    "kPublishVideoStream": kPublishVideoStream,
    "kPublishDataStream": kPublishDataStream,
    "kRtmLogin": kRtmLogin,
}

# Roles
RTC_ATTENDEE = 0
RTC_PUBLISHER = 1
RTC_SUBSCRIBER = 2
RTC_ADMIN = 101

RTM_USER = 1
