"""Next.js app-router templates."""

from appforge.models.project import Language

LAYOUT_TEMPLATE = """import Navbar from '../components/Navbar';
import './globals.css';
{metadata_import}
export const metadata{metadata_type} = {{
  title: '{title}',
  description: '{description}',
}};

export default function RootLayout({{ children }}{children_type}) {{
  return (
    <html lang="en">
      <body>
        <Navbar />
        <main>{{children}}</main>
      </body>
    </html>
  );
}}
"""

PAGE = """export default function Home() {
  return (
    <section>
      <h1>Welcome</h1>
      <p>Your new Next.js application is ready.</p>
    </section>
  );
}
"""

ABOUT_PAGE = """export default function About() {
  return (
    <section>
      <h1>About</h1>
      <p>This project was scaffolded automatically.</p>
    </section>
  );
}
"""

NAVBAR = """import Link from 'next/link';

export default function Navbar() {
  return (
    <nav>
      <Link href="/">Home</Link>
      <Link href="/about">About</Link>
    </nav>
  );
}
"""

API_ROUTE = """import { NextResponse } from 'next/server';

export async function GET() {
  return NextResponse.json({ message: 'Hello from the API' });
}
"""


def _js_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", " ")


def render_layout(language: Language, name: str, description: str | None = None) -> str:
    typescript = language is Language.TYPESCRIPT
    return LAYOUT_TEMPLATE.format(
        metadata_import="import type { Metadata } from 'next';\n" if typescript else "",
        metadata_type=": Metadata" if typescript else "",
        children_type=": { children: React.ReactNode }" if typescript else "",
        title=_js_string(name),
        description=_js_string(description or "Generated by appforge"),
    )

