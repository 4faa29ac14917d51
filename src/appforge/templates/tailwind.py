"""Tailwind CSS files shared by the command plan and the file tree."""

CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: ["./src/**/*.{js,jsx,ts,tsx}"],
  theme: {
    extend: {},
  },
  plugins: [],
}"""

GLOBAL_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;"""
