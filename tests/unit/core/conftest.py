"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_GUIDE = """\
# Field Guide

TL;DR:
- Narratives spread fast
- Check the [source](https://example.com/src)

## Why it matters

This is **bold** and *italic*.

- one
- two
### Details
> A quoted line.

```text
raw *stays* raw
```
"""

SAMPLE_FM_GUIDE = """\
---
title: Test Guide
summary: Short summary.
created_at: 2026-01-15
tags: [a, b]
---

## Intro

Body content.
"""


@pytest.fixture(name="sample_guide")
def sample_guide_fixture():
    return SAMPLE_GUIDE


@pytest.fixture(name="sample_fm_guide")
def sample_fm_guide_fixture():
    return SAMPLE_FM_GUIDE
