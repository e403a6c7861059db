"""FastAPI server that exposes the game to a browser."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict
import logging
from threading import Thread

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from numclass_app.constants.about import APP_NAME, APP_VERSION
from numclass_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from numclass_app.core.content_renderer import renderer
from numclass_app.core.game_manager import GameManager, SessionSnapshot

logger = logging.getLogger(__name__)

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>Number Classification</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f3f4f6; color: #111827; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; align-items: center; gap: 1rem; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.12); width: 100%; max-width: 28rem; }
      .wide { max-width: 72rem; }
      .hidden { display: none; }
      h1, h2 { text-align: center; }
      input { width: 100%; box-sizing: border-box; padding: 0.75rem; border: 1px solid #d1d5db; border-radius: 0.5rem; font-size: 1rem; }
      .primary-button, .secondary-button { width: 100%; margin-top: 0.75rem; border: none; border-radius: 0.5rem; padding: 0.75rem; font-size: 1rem; cursor: pointer; }
      .primary-button { background: #2563eb; color: #fff; }
      .primary-button:hover { background: #1d4ed8; }
      .primary-button:disabled { opacity: 0.5; cursor: not-allowed; }
      .secondary-button { background: #e5e7eb; color: #1f2937; }
      .close-button { float: right; border: none; background: none; font-size: 1.5rem; cursor: pointer; color: #9ca3af; }
      #top-bar { display: flex; flex-wrap: wrap; gap: 1rem; align-items: center; justify-content: space-between; }
      #top-bar .primary-button { width: auto; margin: 0; padding: 0.5rem 1.25rem; background: #16a34a; }
      #board { display: flex; flex-wrap: wrap; gap: 1rem; }
      #numbers-panel { flex: 1 1 18rem; }
      #categories-panel { flex: 2 1 30rem; }
      .numbers-grid { display: grid; grid-template-columns: repeat(4, 1fr); gap: 0.75rem; }
      .number-card { padding: 0.75rem; text-align: center; font-weight: bold; font-size: 1.1rem; border-radius: 0.5rem; cursor: pointer; box-shadow: 0 0 0 2px transparent; background: #fff; border: 1px solid #e5e7eb; }
      .number-card.selected { box-shadow: 0 0 0 2px #3b82f6; background: #eff6ff; }
      .categories-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(14rem, 1fr)); gap: 1rem; }
      .category { padding: 0.75rem; border: 2px dashed #d1d5db; border-radius: 0.5rem; background: #f9fafb; cursor: pointer; min-height: 4.5rem; }
      .category h3 { margin: 0 0 0.25rem 0; font-size: 1rem; }
      .category .description { font-size: 0.75rem; color: #4b5563; }
      .chip { display: inline-block; margin: 0.2rem; padding: 0.15rem 0.6rem; border-radius: 999px; background: #dbeafe; color: #1e40af; font-size: 0.8rem; cursor: pointer; }
      .leaderboard-row { display: flex; justify-content: space-between; padding: 0.75rem; margin-bottom: 0.5rem; background: #f9fafb; border-radius: 0.5rem; }
      .correct { color: #16a34a; font-weight: bold; }
      .wrong { color: #dc2626; font-weight: bold; }
      .muted { color: #6b7280; text-align: center; }
    </style>
  </head>
  <body>
    <section class=\"card\" id=\"start-card\">
      <h1>Number Classification</h1>
      <input id=\"name-input\" type=\"text\" placeholder=\"Enter your name\" aria-label=\"Player name\" />
      <button id=\"start-button\" class=\"primary-button\" disabled>Start Game</button>
      <button id=\"leaderboard-button\" class=\"secondary-button\">Leaderboard</button>
    </section>

    <section class=\"card hidden\" id=\"instructions-card\">
      <button class=\"close-button\" id=\"close-instructions\" aria-label=\"Close instructions\">&times;</button>
      <h1>How to Play</h1>
      <div id=\"instructions-body\"></div>
      <button id=\"play-button\" class=\"primary-button\">Start Game</button>
    </section>

    <section class=\"card wide hidden\" id=\"playing-card\">
      <div id=\"top-bar\">
        <strong id=\"player-label\"></strong>
        <span aria-label=\"Elapsed Time\" id=\"time-label\"></span>
        <span aria-label=\"Classified Numbers\" id=\"classified-label\"></span>
        <button id=\"submit-button\" class=\"primary-button\" aria-label=\"Submit Answers\">Submit</button>
      </div>
      <div id=\"board\">
        <div id=\"numbers-panel\">
          <h2>Numbers</h2>
          <div id=\"numbers-grid\" class=\"numbers-grid\"></div>
        </div>
        <div id=\"categories-panel\">
          <h2>Categories</h2>
          <div id=\"categories-grid\" class=\"categories-grid\"></div>
        </div>
      </div>
    </section>

    <section class=\"card hidden\" id=\"results-card\">
      <h2>Game Results</h2>
      <p>Correct Answers: <span class=\"correct\" id=\"results-correct\"></span></p>
      <p>Wrong Answers: <span class=\"wrong\" id=\"results-wrong\"></span></p>
      <p>Total Classified: <strong id=\"results-total\"></strong></p>
      <p>Time: <strong id=\"results-time\"></strong></p>
      <button id=\"continue-button\" class=\"primary-button\">Continue</button>
    </section>

    <section class=\"card hidden\" id=\"game-over-card\">
      <h2>Game Over!</h2>
      <p class=\"muted\" id=\"final-score\"></p>
      <p class=\"muted\" id=\"final-time\"></p>
      <button id=\"menu-button\" class=\"primary-button\">Back to Main Menu</button>
      <button id=\"game-over-leaderboard-button\" class=\"secondary-button\">Leaderboard</button>
    </section>

    <section class=\"card hidden\" id=\"leaderboard-card\">
      <h2>Leaderboard</h2>
      <div id=\"leaderboard-list\"></div>
      <button id=\"leaderboard-back\" class=\"primary-button\">Back</button>
    </section>

    <script>
      const cards = {
        start: document.getElementById('start-card'),
        instructions: document.getElementById('instructions-card'),
        playing: document.getElementById('playing-card'),
        results: document.getElementById('results-card'),
        gameOver: document.getElementById('game-over-card'),
        leaderboard: document.getElementById('leaderboard-card'),
      };
      const nameInput = document.getElementById('name-input');
      const startButton = document.getElementById('start-button');
      let content = { categories: [], instructions_html: '' };
      let pollHandle = null;

      function setVisibility(element, isVisible) {
        element.classList.toggle('hidden', !isVisible);
      }

      async function send(path, body) {
        const response = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body || {}),
        });
        const state = await response.json();
        render(state);
        return state;
      }

      function renderPlaying(state) {
        document.getElementById('player-label').textContent = state.player_name;
        document.getElementById('time-label').textContent = '⏱ ' + state.elapsed_display;
        document.getElementById('classified-label').textContent =
          '✅ ' + state.classified_count + '/' + state.question_count;

        const numbersGrid = document.getElementById('numbers-grid');
        numbersGrid.innerHTML = '';
        state.pool.forEach(number => {
          const card = document.createElement('div');
          card.className = 'number-card' + (state.selected_number === number ? ' selected' : '');
          card.textContent = number;
          card.setAttribute('role', 'button');
          card.setAttribute('aria-label', 'Select number ' + number);
          card.addEventListener('click', () => send('/select', { number }));
          numbersGrid.appendChild(card);
        });

        const categoriesGrid = document.getElementById('categories-grid');
        categoriesGrid.innerHTML = '';
        content.categories.forEach(category => {
          const zone = document.createElement('div');
          zone.className = 'category';
          zone.setAttribute('role', 'button');
          zone.setAttribute('aria-label', 'Drop numbers here for ' + category.name);
          zone.innerHTML = '<h3></h3><div class="description"></div><div class="chips"></div>';
          zone.querySelector('h3').textContent = category.name;
          zone.querySelector('.description').innerHTML = category.description_html;
          zone.addEventListener('click', () => send('/place', { category_id: category.id }));
          const chips = zone.querySelector('.chips');
          (state.assignments[category.id] || []).forEach(number => {
            const chip = document.createElement('span');
            chip.className = 'chip';
            chip.textContent = number;
            chip.setAttribute('aria-label', 'Remove number ' + number + ' from ' + category.name);
            chip.addEventListener('click', event => {
              event.stopPropagation();
              send('/remove', { number, category_id: category.id });
            });
            chips.appendChild(chip);
          });
          categoriesGrid.appendChild(zone);
        });
      }

      function renderLeaderboard(state) {
        const list = document.getElementById('leaderboard-list');
        list.innerHTML = '';
        if (state.leaderboard.length === 0) {
          list.innerHTML = '<p class="muted">No scores yet. Be the first to play!</p>';
          return;
        }
        state.leaderboard.forEach(entry => {
          const row = document.createElement('div');
          row.className = 'leaderboard-row';
          row.innerHTML = '<span></span><strong></strong>';
          row.querySelector('span').textContent = entry.name;
          row.querySelector('strong').textContent = entry.score;
          list.appendChild(row);
        });
      }

      function render(state) {
        Object.values(cards).forEach(card => setVisibility(card, false));
        if (state.leaderboard_open) {
          renderLeaderboard(state);
          setVisibility(cards.leaderboard, true);
          return;
        }
        setVisibility(cards[state.phase], true);
        if (state.phase === 'start') {
          if (document.activeElement !== nameInput) {
            nameInput.value = state.player_name;
          }
          startButton.disabled = !nameInput.value.trim();
        } else if (state.phase === 'playing') {
          renderPlaying(state);
        } else if (state.phase === 'results') {
          document.getElementById('results-correct').textContent = state.results.correct;
          document.getElementById('results-wrong').textContent = state.results.wrong;
          document.getElementById('results-total').textContent = state.results.total;
          document.getElementById('results-time').textContent = state.elapsed_display;
        } else if (state.phase === 'gameOver') {
          document.getElementById('final-score').textContent = 'Score: ' + state.score;
          document.getElementById('final-time').textContent = 'Time: ' + state.elapsed_display;
        }
        if (state.phase === 'playing' && pollHandle === null) {
          pollHandle = setInterval(refreshState, 1000);
        } else if (state.phase !== 'playing' && pollHandle !== null) {
          clearInterval(pollHandle);
          pollHandle = null;
        }
      }

      async function refreshState() {
        try {
          const response = await fetch('/state');
          render(await response.json());
        } catch (error) {
          console.error('Error fetching state:', error);
        }
      }

      let nameTimer = null;
      nameInput.addEventListener('input', () => {
        startButton.disabled = !nameInput.value.trim();
        clearTimeout(nameTimer);
        nameTimer = setTimeout(() => send('/name', { name: nameInput.value }), 300);
      });
      startButton.addEventListener('click', () => {
        clearTimeout(nameTimer);
        send('/instructions', { name: nameInput.value });
      });
      document.getElementById('leaderboard-button').addEventListener('click', () => send('/leaderboard/open'));
      document.getElementById('close-instructions').addEventListener('click', () => send('/instructions/dismiss'));
      document.getElementById('play-button').addEventListener('click', () => send('/start'));
      document.getElementById('submit-button').addEventListener('click', () => send('/submit'));
      document.getElementById('continue-button').addEventListener('click', () => send('/continue'));
      document.getElementById('menu-button').addEventListener('click', () => send('/menu'));
      document.getElementById('game-over-leaderboard-button').addEventListener('click', () => send('/leaderboard/open'));
      document.getElementById('leaderboard-back').addEventListener('click', () => send('/leaderboard/close'));

      async function init() {
        const response = await fetch('/content');
        content = await response.json();
        document.getElementById('instructions-body').innerHTML = content.instructions_html;
        await refreshState();
      }

      init();
    </script>
  </body>
</html>
"""


class NamePayload(BaseModel):
    """Payload schema for the player name field."""

    name: str


class InstructionsPayload(BaseModel):
    """Optional name sent along with opening the instructions."""

    name: str | None = None


class NumberPayload(BaseModel):
    """Payload schema for picking up a number."""

    number: str


class CategoryPayload(BaseModel):
    """Payload schema for dropping the selected number on a category."""

    category_id: str


class RemovePayload(BaseModel):
    """Payload schema for sending a placed number back to the pool."""

    number: str
    category_id: str


def serialize_snapshot(snapshot: SessionSnapshot) -> dict[str, object]:
    """Convert a session snapshot into the JSON shape the page renders."""
    return {
        "phase": snapshot.phase.value,
        "player_name": snapshot.player_name,
        "elapsed_seconds": snapshot.elapsed_seconds,
        "elapsed_display": snapshot.elapsed_display,
        "score": snapshot.score,
        "pool": snapshot.pool,
        "assignments": snapshot.assignments,
        "selected_number": snapshot.selected_number,
        "results": asdict(snapshot.results) if snapshot.results else None,
        "leaderboard": [asdict(entry) for entry in snapshot.leaderboard],
        "leaderboard_open": snapshot.leaderboard_open,
        "classified_count": snapshot.classified_count,
        "question_count": snapshot.question_count,
    }


def _get_game_manager_dependency(game_manager: GameManager):
    def dependency() -> GameManager:
        return game_manager

    return dependency


def create_api_app(game_manager: GameManager) -> FastAPI:
    """Create a FastAPI application wired to the provided game manager."""
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        game_manager.shutdown()

    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION, lifespan=lifespan)
    game_manager_dep = _get_game_manager_dependency(game_manager)

    def respond(manager: GameManager, accepted: bool) -> dict[str, object]:
        body = serialize_snapshot(manager.snapshot())
        body["accepted"] = accepted
        return body

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/state")
    def get_state(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return serialize_snapshot(manager.snapshot())

    @app.get("/content")
    def get_content(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        categories = manager.get_categories()
        descriptions = renderer.render_category_descriptions(categories)
        return {
            "categories": [
                {
                    "id": category.id,
                    "name": category.name,
                    "description": category.description,
                    "description_html": descriptions[category.id],
                }
                for category in categories
            ],
            "instructions_html": renderer.render_instructions(),
        }

    @app.get("/leaderboard")
    def get_leaderboard(manager: GameManager = Depends(game_manager_dep)) -> list[dict[str, object]]:
        return [asdict(entry) for entry in manager.get_leaderboard()]

    @app.post("/name")
    def set_name(payload: NamePayload, manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.set_player_name(payload.name))

    @app.post("/instructions")
    def go_to_instructions(
        payload: InstructionsPayload | None = None,
        manager: GameManager = Depends(game_manager_dep),
    ) -> dict[str, object]:
        if payload is not None and payload.name is not None:
            manager.set_player_name(payload.name)
        return respond(manager, manager.go_to_instructions())

    @app.post("/instructions/dismiss")
    def dismiss_instructions(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.dismiss_instructions())

    @app.post("/start")
    def start_game(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.start_game())

    @app.post("/select")
    def select_number(payload: NumberPayload, manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.select_number(payload.number))

    @app.post("/place")
    def place_in_category(
        payload: CategoryPayload,
        manager: GameManager = Depends(game_manager_dep),
    ) -> dict[str, object]:
        return respond(manager, manager.place_in_category(payload.category_id))

    @app.post("/remove")
    def remove_from_category(
        payload: RemovePayload,
        manager: GameManager = Depends(game_manager_dep),
    ) -> dict[str, object]:
        return respond(manager, manager.remove_from_category(payload.number, payload.category_id))

    @app.post("/submit")
    def submit(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.submit())

    @app.post("/continue")
    def continue_after_results(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.continue_after_results())

    @app.post("/menu")
    def return_to_start(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.return_to_start())

    @app.post("/leaderboard/open")
    def open_leaderboard(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.open_leaderboard())

    @app.post("/leaderboard/close")
    def close_leaderboard(manager: GameManager = Depends(game_manager_dep)) -> dict[str, object]:
        return respond(manager, manager.close_leaderboard())

    return app


def start_api_server(
    game_manager: GameManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(game_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="GameApiServer", daemon=True)
    thread.start()
    logger.info("Browser game available at http://%s:%d/", host, port)
    return thread


def run_api_server(game_manager: GameManager, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve the browser game in the foreground until interrupted."""
    uvicorn.run(create_api_app(game_manager), host=host, port=port, log_level="info")
