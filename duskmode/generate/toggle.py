"""Generate a theme toggle that sets the ``.dark`` class on the document root."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Tuple

from ..io.models import ToggleComponent

logger = logging.getLogger(__name__)

DEFAULT_COMPONENT_NAME = "ThemeToggle"
SCRIPT_FILENAME = "theme-toggle.js"

_COMPONENT_NAME = re.compile(r"[A-Z][A-Za-z0-9]*")

# Framework -> template kind; anything unrecognised gets the vanilla script.
_TEMPLATE_KINDS: Dict[str, str] = {
    "react": "react",
    "nextjs": "react",
    "vue": "vue",
    "nuxt": "vue",
    "html": "html",
}

_PLACEMENTS: Dict[str, Tuple[str, ...]] = {
    "react": ("src/components", "components", "src", "app/components"),
    "vue": ("src/components", "components", "src"),
    "html": ("js", "assets/js", "static/js", "public/js", ""),
}

_SIZE_CLASSES = {
    "sm": "w-8 h-8 text-sm",
    "md": "w-10 h-10 text-base",
    "lg": "w-12 h-12 text-lg",
}

_BUTTON_CLASSES = (
    "inline-flex items-center justify-center rounded-lg border transition-colors "
    "bg-white dark:bg-gray-800 border-gray-200 dark:border-gray-700 "
    "text-gray-900 dark:text-gray-100 hover:bg-gray-50 dark:hover:bg-gray-700 "
    "focus:outline-none focus:ring-2 focus:ring-blue-500 dark:focus:ring-blue-400 focus:ring-offset-2"
)

_REACT_TEMPLATE = """'use client';

import React, { useEffect, useState } from 'react';
__INTERFACE__
const SIZE_CLASSES = {
  sm: '__SIZE_SM__',
  md: '__SIZE_MD__',
  lg: '__SIZE_LG__',
};

export function __NAME__({ className = '', size = 'md' }__PROPS_TYPE__) {
  const [theme, setTheme] = useState__THEME_TYPE__('light');
  const [mounted, setMounted] = useState(false);

  const applyTheme = (next__THEME_ARG__) => {
    document.documentElement.classList.toggle('dark', next === 'dark');
    localStorage.setItem('theme', next);
  };

  useEffect(() => {
    const saved = localStorage.getItem('theme');
    const prefersDark = window.matchMedia('(prefers-color-scheme: dark)').matches;
    const initial = saved === 'dark' || saved === 'light' ? saved : prefersDark ? 'dark' : 'light';
    setTheme(initial);
    applyTheme(initial);
    setMounted(true);
  }, []);

  const toggleTheme = () => {
    const next = theme === 'light' ? 'dark' : 'light';
    setTheme(next);
    applyTheme(next);
  };

  // Rendering before mount would mismatch the server-rendered markup.
  if (!mounted) {
    return null;
  }

  const label = `Switch to ${theme === 'light' ? 'dark' : 'light'} mode`;
  return (
    <button
      type="button"
      onClick={toggleTheme}
      className={`__BUTTON_CLASSES__ ${SIZE_CLASSES[size]} ${className}`}
      aria-label={label}
      title={label}
    >
      <span role="img" aria-hidden="true">
        {theme === 'light' ? '\\u{1F319}' : '\\u{2600}\\u{FE0F}'}
      </span>
    </button>
  );
}

export default __NAME__;
"""

_REACT_INTERFACE = """
type Theme = 'light' | 'dark';

interface __NAME__Props {
  className?: string;
  size?: 'sm' | 'md' | 'lg';
}
"""

_VUE_TEMPLATE = """<template>
  <button
    v-if="mounted"
    type="button"
    :class="['__BUTTON_CLASSES__', sizeClasses[size], className]"
    :aria-label="label"
    :title="label"
    @click="toggleTheme"
  >
    <span role="img" aria-hidden="true">{{ theme === 'light' ? '\\u{1F319}' : '\\u{2600}\\u{FE0F}' }}</span>
  </button>
</template>

<script setup>
import { computed, onMounted, ref } from 'vue';

defineProps({
  className: { type: String, default: '' },
  size: { type: String, default: 'md' },
});

const sizeClasses = {
  sm: '__SIZE_SM__',
  md: '__SIZE_MD__',
  lg: '__SIZE_LG__',
};

const theme = ref('light');
const mounted = ref(false);
const label = computed(() => `Switch to ${theme.value === 'light' ? 'dark' : 'light'} mode`);

function applyTheme(next) {
  document.documentElement.classList.toggle('dark', next === 'dark');
  localStorage.setItem('theme', next);
}

function toggleTheme() {
  theme.value = theme.value === 'light' ? 'dark' : 'light';
  applyTheme(theme.value);
}

onMounted(() => {
  const saved = localStorage.getItem('theme');
  const prefersDark = window.matchMedia('(prefers-color-scheme: dark)').matches;
  theme.value = saved === 'dark' || saved === 'light' ? saved : prefersDark ? 'dark' : 'light';
  applyTheme(theme.value);
  mounted.value = true;
});
</script>
"""

_SCRIPT_TEMPLATE = """/**
 * Theme toggle: renders a button into every [data-theme-toggle] element and
 * keeps the `dark` class on <html> in sync with localStorage.
 */
(function () {
  var SIZE_CLASSES = {
    sm: '__SIZE_SM__',
    md: '__SIZE_MD__',
    lg: '__SIZE_LG__'
  };

  function storedTheme() {
    var saved = localStorage.getItem('theme');
    if (saved === 'dark' || saved === 'light') {
      return saved;
    }
    return window.matchMedia('(prefers-color-scheme: dark)').matches ? 'dark' : 'light';
  }

  var theme = storedTheme();

  function render() {
    var buttons = document.querySelectorAll('.theme-toggle-btn');
    buttons.forEach(function (button) {
      var label = 'Switch to ' + (theme === 'light' ? 'dark' : 'light') + ' mode';
      button.setAttribute('aria-label', label);
      button.setAttribute('title', label);
      button.querySelector('.theme-icon').textContent = theme === 'light' ? '\\u{1F319}' : '\\u{2600}\\u{FE0F}';
    });
  }

  function applyTheme(next, persist) {
    theme = next;
    document.documentElement.classList.toggle('dark', next === 'dark');
    if (persist) {
      localStorage.setItem('theme', next);
    }
    render();
  }

  function mount() {
    document.querySelectorAll('[data-theme-toggle]').forEach(function (container) {
      if (container.dataset.initialized) {
        return;
      }
      var size = SIZE_CLASSES[container.dataset.size] || SIZE_CLASSES.md;
      container.innerHTML =
        '<button type="button" class="theme-toggle-btn __BUTTON_CLASSES__ ' + size + '">' +
        '<span role="img" aria-hidden="true" class="theme-icon"></span></button>';
      container.dataset.initialized = 'true';
    });
    render();
  }

  document.addEventListener('click', function (event) {
    if (event.target.closest('.theme-toggle-btn')) {
      applyTheme(theme === 'light' ? 'dark' : 'light', true);
    }
  });

  window.matchMedia('(prefers-color-scheme: dark)').addEventListener('change', function (event) {
    if (!localStorage.getItem('theme')) {
      applyTheme(event.matches ? 'dark' : 'light', false);
    }
  });

  applyTheme(theme, false);
  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', mount);
  } else {
    mount();
  }

  window.createThemeToggle = mount;
})();
"""


def template_kind(framework: str) -> str:
    return _TEMPLATE_KINDS.get(framework, "html")


def suggest_component_placement(root: Path, framework: str) -> Tuple[Path, Tuple[Path, ...]]:
    """Return ``(suggested, alternatives)`` directories for the toggle.

    The first conventional directory that already exists wins; otherwise the
    first candidate is suggested and created on write.
    """
    candidates = [
        root / relative if relative else root
        for relative in _PLACEMENTS[template_kind(framework)]
    ]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate, tuple(alt for alt in candidates if alt != candidate)
    return candidates[0], tuple(candidates[1:])


def _fill(template: str, name: str) -> str:
    content = template.replace("__BUTTON_CLASSES__", _BUTTON_CLASSES)
    for size, classes in _SIZE_CLASSES.items():
        content = content.replace(f"__SIZE_{size.upper()}__", classes)
    return content.replace("__NAME__", name)


def render_toggle(kind: str, name: str = DEFAULT_COMPONENT_NAME, typescript: bool = False) -> str:
    """Return the toggle source for template *kind* (``react``, ``vue`` or ``html``)."""
    if kind == "react":
        content = _REACT_TEMPLATE
        replacements = {
            "__INTERFACE__": _REACT_INTERFACE if typescript else "",
            "__PROPS_TYPE__": f": {name}Props" if typescript else "",
            "__THEME_TYPE__": "<Theme>" if typescript else "",
            "__THEME_ARG__": ": Theme" if typescript else "",
        }
        for placeholder, value in replacements.items():
            content = content.replace(placeholder, value)
        return _fill(content, name)
    if kind == "vue":
        return _fill(_VUE_TEMPLATE, name)
    return _fill(_SCRIPT_TEMPLATE, name)


def _instructions(kind: str, name: str, filename: str) -> Tuple[str, ...]:
    if kind == "react":
        return (
            f"Import the component: import {{ {name} }} from './path/to/{filename}';",
            f"Render it in a header or navigation: <{name} />",
            'Props: className (extra classes), size ("sm" | "md" | "lg", default "md").',
        )
    if kind == "vue":
        return (
            f"Import the component: import {name} from './path/to/{filename}';",
            f"Add it to a template: <{name} />",
            'Props: class-name (extra classes), size ("sm" | "md" | "lg", default "md").',
        )
    return (
        f'Include the script in every page: <script src="{filename}"></script>',
        "Mark where the toggle goes: <div data-theme-toggle></div>",
        'Optional size: <div data-theme-toggle data-size="lg"></div>',
    )


def generate_theme_toggle(
    root: Path,
    framework: str,
    output_dir: Path | None = None,
    component_name: str = DEFAULT_COMPONENT_NAME,
    typescript: bool | None = None,
    overwrite: bool = False,
) -> ToggleComponent:
    """Write a theme toggle for *framework* under *root*.

    An existing file is left untouched unless *overwrite* is set; the returned
    component then has ``written=False``. ``typescript=None`` means a
    ``tsconfig.json`` at the project root selects ``.tsx`` for React.
    """
    if not _COMPONENT_NAME.fullmatch(component_name):
        raise ValueError(f"Component name must be PascalCase: {component_name!r}")
    kind = template_kind(framework)
    if typescript is None:
        typescript = (root / "tsconfig.json").is_file()

    if kind == "react":
        filename = f"{component_name}.{'tsx' if typescript else 'jsx'}"
    elif kind == "vue":
        filename = f"{component_name}.vue"
    else:
        filename = SCRIPT_FILENAME

    directory = Path(output_dir) if output_dir is not None else suggest_component_placement(root, kind)[0]
    target = directory / filename
    content = render_toggle(kind, component_name, typescript)
    instructions = _instructions(kind, component_name, filename)

    if target.exists() and not overwrite:
        logger.info("Theme toggle already exists at %s; leaving it unchanged", target)
        return ToggleComponent(
            path=target,
            framework=kind,
            content=content,
            instructions=instructions,
            written=False,
        )

    directory.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Wrote %s theme toggle to %s", kind, target)
    return ToggleComponent(
        path=target,
        framework=kind,
        content=content,
        instructions=instructions,
        written=True,
    )
