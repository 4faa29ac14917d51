"""React (create-react-app) component templates."""

from appforge.models.project import Language

APP_TEMPLATE = """import React, {{ useState }} from 'react';
import Navbar from './components/Navbar';
import Home from './components/Home';
import About from './components/About';

function App() {{
  const [page, setPage] = useState{page_generic}('home');

  return (
    <div className="App">
      <Navbar current={{page}} onNavigate={{setPage}} />
      <main>
        {{page === 'home' ? <Home /> : <About />}}
      </main>
    </div>
  );
}}

export default App;
"""

HOME = """import React from 'react';

function Home() {
  return (
    <section>
      <h1>Welcome</h1>
      <p>Your new React application is ready.</p>
    </section>
  );
}

export default Home;
"""

ABOUT = """import React from 'react';

function About() {
  return (
    <section>
      <h1>About</h1>
      <p>This project was scaffolded automatically.</p>
    </section>
  );
}

export default About;
"""

NAVBAR_TEMPLATE = """import React from 'react';

{props_type}function Navbar({{ current, onNavigate }}{props_annotation}) {{
  const links = ['home', 'about'];

  return (
    <nav>
      {{links.map((link) => (
        <button
          key={{link}}
          disabled={{current === link}}
          onClick={{() => onNavigate(link)}}
        >
          {{link === 'home' ? 'Home' : 'About'}}
        </button>
      ))}}
    </nav>
  );
}}

export default Navbar;
"""

_TS_NAVBAR_PROPS = """interface NavbarProps {
  current: string;
  onNavigate: (page: string) => void;
}

"""


def render_app(language: Language) -> str:
    typescript = language is Language.TYPESCRIPT
    return APP_TEMPLATE.format(
        page_generic="<string>" if typescript else "",
    )


def render_navbar(language: Language) -> str:
    typescript = language is Language.TYPESCRIPT
    return NAVBAR_TEMPLATE.format(
        props_type=_TS_NAVBAR_PROPS if typescript else "",
        props_annotation=": NavbarProps" if typescript else "",
    )
