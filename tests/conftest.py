"""Shared fixtures for storydoc tests."""

import os
from pathlib import Path

import pytest

from storydoc.config import Settings


BUTTON_STORIES = r"""import React from 'react';
import type { Meta, StoryObj } from '@storybook/react';
import { Button } from './Button';

const meta: Meta<typeof Button> = {
  title: 'Components/Button',
  component: Button,
  parameters: {
    docs: {
      description: {
        component: `A versatile button component with multiple variants and sizes.`
      }
    }
  }
};

export default meta;

type Story = StoryObj<typeof meta>;

export const Primary: Story = {
  name: 'Primary Button',
  story: 'The primary button is used for main actions.',
  render: () => {
    return (
      <Button primary size="medium">
        Click me
      </Button>
    );
  }
};

export const Secondary = () => {
  return <Button secondary>Secondary</Button>;
};

export const API: Story = {
  story: `
## Props

| Prop | Type | Default |
|------|------|---------|
| primary | boolean | false |

## Usage

\`\`\`tsx
<Button primary>Primary Button</Button>
\`\`\`
  `
};
"""


@pytest.fixture
def button_stories() -> str:
    return BUTTON_STORIES


@pytest.fixture
def packages_dir(tmp_path: Path) -> Path:
    """A packages tree with one documented component and one without stories."""
    packages = tmp_path / "packages"

    button_src = packages / "Button" / "src"
    button_src.mkdir(parents=True)
    (button_src / "index.stories.tsx").write_text(BUTTON_STORIES, encoding="utf-8")

    (packages / "Empty").mkdir()
    (packages / "node_modules").mkdir()
    (packages / ".cache").mkdir()

    return packages


@pytest.fixture
def settings(packages_dir: Path) -> Settings:
    return Settings(packages_dir=packages_dir)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep STORYDOC_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("STORYDOC_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
