"""Express backend templates.

Both language variants expose the same in-memory CRUD API over
``{id, name}`` items under ``/api/items``.
"""

import json

from appforge.models.project import Language

SERVER_TS = """import express, { Express, Request, Response } from 'express';
import cors from 'cors';
import dotenv from 'dotenv';
import routes from './routes';

// Load environment variables
dotenv.config();

const app: Express = express();
const port = process.env.PORT || 3000;

// Middleware
app.use(cors());
app.use(express.json());

// Routes
app.use('/api', routes);

app.get('/', (req: Request, res: Response) => {
  res.send('Express + TypeScript Server is running');
});

app.listen(port, () => {
  console.log(`[server]: Server is running at http://localhost:${port}`);
});
"""

SERVER_JS = """const express = require('express');
const cors = require('cors');
const dotenv = require('dotenv');
const routes = require('./routes');

// Load environment variables
dotenv.config();

const app = express();
const port = process.env.PORT || 3000;

// Middleware
app.use(cors());
app.use(express.json());

// Routes
app.use('/api', routes);

app.get('/', (req, res) => {
  res.send('Express Server is running');
});

app.listen(port, () => {
  console.log(`[server]: Server is running at http://localhost:${port}`);
});
"""

ROUTES_TS = """import { Router } from 'express';
import { getItems, getItemById, createItem, updateItem, deleteItem } from '../controllers';

const router = Router();

router.get('/items', getItems);
router.get('/items/:id', getItemById);
router.post('/items', createItem);
router.put('/items/:id', updateItem);
router.delete('/items/:id', deleteItem);

export default router;
"""

ROUTES_JS = """const { Router } = require('express');
const { getItems, getItemById, createItem, updateItem, deleteItem } = require('../controllers');

const router = Router();

router.get('/items', getItems);
router.get('/items/:id', getItemById);
router.post('/items', createItem);
router.put('/items/:id', updateItem);
router.delete('/items/:id', deleteItem);

module.exports = router;
"""

CONTROLLERS_TS = """import { Request, Response } from 'express';

interface Item {
  id: number;
  name: string;
}

// Mock data
let items: Item[] = [
  { id: 1, name: 'Item 1' },
  { id: 2, name: 'Item 2' }
];

export const getItems = (req: Request, res: Response) => {
  res.json(items);
};

export const getItemById = (req: Request, res: Response) => {
  const id = parseInt(req.params.id);
  const item = items.find(item => item.id === id);

  if (!item) {
    return res.status(404).json({ message: 'Item not found' });
  }

  res.json(item);
};

export const createItem = (req: Request, res: Response) => {
  const { name } = req.body;

  if (!name) {
    return res.status(400).json({ message: 'Name is required' });
  }

  const newId = items.length > 0 ? Math.max(...items.map(item => item.id)) + 1 : 1;
  const newItem: Item = { id: newId, name };

  items.push(newItem);
  res.status(201).json(newItem);
};

export const updateItem = (req: Request, res: Response) => {
  const id = parseInt(req.params.id);
  const { name } = req.body;

  const itemIndex = items.findIndex(item => item.id === id);

  if (itemIndex === -1) {
    return res.status(404).json({ message: 'Item not found' });
  }

  items[itemIndex] = { ...items[itemIndex], name };
  res.json(items[itemIndex]);
};

export const deleteItem = (req: Request, res: Response) => {
  const id = parseInt(req.params.id);

  const itemIndex = items.findIndex(item => item.id === id);

  if (itemIndex === -1) {
    return res.status(404).json({ message: 'Item not found' });
  }

  const deletedItem = items[itemIndex];
  items = items.filter(item => item.id !== id);

  res.json(deletedItem);
};
"""

CONTROLLERS_JS = """// Mock data
let items = [
  { id: 1, name: 'Item 1' },
  { id: 2, name: 'Item 2' }
];

const getItems = (req, res) => {
  res.json(items);
};

const getItemById = (req, res) => {
  const id = parseInt(req.params.id);
  const item = items.find(item => item.id === id);

  if (!item) {
    return res.status(404).json({ message: 'Item not found' });
  }

  res.json(item);
};

const createItem = (req, res) => {
  const { name } = req.body;

  if (!name) {
    return res.status(400).json({ message: 'Name is required' });
  }

  const newId = items.length > 0 ? Math.max(...items.map(item => item.id)) + 1 : 1;
  const newItem = { id: newId, name };

  items.push(newItem);
  res.status(201).json(newItem);
};

const updateItem = (req, res) => {
  const id = parseInt(req.params.id);
  const { name } = req.body;

  const itemIndex = items.findIndex(item => item.id === id);

  if (itemIndex === -1) {
    return res.status(404).json({ message: 'Item not found' });
  }

  items[itemIndex] = { ...items[itemIndex], name };
  res.json(items[itemIndex]);
};

const deleteItem = (req, res) => {
  const id = parseInt(req.params.id);

  const itemIndex = items.findIndex(item => item.id === id);

  if (itemIndex === -1) {
    return res.status(404).json({ message: 'Item not found' });
  }

  const deletedItem = items[itemIndex];
  items = items.filter(item => item.id !== id);

  res.json(deletedItem);
};

module.exports = {
  getItems,
  getItemById,
  createItem,
  updateItem,
  deleteItem
};
"""

ENV_FILE = "PORT=3000\nNODE_ENV=development\n"

GITIGNORE = "node_modules\ndist\n.env\n"

NO_BUILD_MESSAGE = "echo 'No build step required'"


def render_server(language: Language) -> str:
    return SERVER_TS if language is Language.TYPESCRIPT else SERVER_JS


def render_routes(language: Language) -> str:
    return ROUTES_TS if language is Language.TYPESCRIPT else ROUTES_JS


def render_controllers(language: Language) -> str:
    return CONTROLLERS_TS if language is Language.TYPESCRIPT else CONTROLLERS_JS


def render_tsconfig() -> str:
    return json.dumps(
        {
            "compilerOptions": {
                "target": "es6",
                "module": "commonjs",
                "outDir": "./dist",
                "strict": True,
                "esModuleInterop": True,
                "skipLibCheck": True,
                "forceConsistentCasingInFileNames": True,
            },
            "include": ["src/**/*"],
            "exclude": ["node_modules"],
        },
        indent=2,
    )


def render_package_json(name: str, language: Language, description: str | None = None) -> str:
    """Render the backend manifest.

    TypeScript projects build with ``tsc`` and run from ``dist``; JavaScript
    projects run their sources directly and have nothing to build.
    """
    if language is Language.TYPESCRIPT:
        main = "dist/index.js"
        scripts = {
            "start": "node dist/index.js",
            "dev": "ts-node-dev --respawn src/index.ts",
            "build": "tsc",
        }
    else:
        main = "src/index.js"
        scripts = {
            "start": "node src/index.js",
            "dev": "nodemon src/index.js",
            "build": NO_BUILD_MESSAGE,
        }

    return json.dumps(
        {
            "name": name,
            "version": "1.0.0",
            "description": description or "Generated Express server",
            "main": main,
            "scripts": scripts,
            "keywords": [],
            "author": "",
            "license": "ISC",
        },
        indent=2,
    )
