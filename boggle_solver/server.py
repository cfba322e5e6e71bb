import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from boggle_solver.board import Board
from boggle_solver.metrics import StageTimer
from boggle_solver.scoring import score_of, total_score
from boggle_solver.settings import settings
from boggle_solver.tst import TernarySearchTrie

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_trie: TernarySearchTrie | None = None


async def _json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body must be valid JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        from boggle_solver.solver import load_trie
        dict_path = settings.DICTIONARY_PATH
        if dict_path.exists():
            logger.info("Loading dictionary from %s", dict_path)
            _trie = load_trie(dict_path)
        else:
            logger.warning("Dictionary %s not found, solving against an empty trie", dict_path)
            _trie = TernarySearchTrie()

        yield

        _trie = None

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "word_count": len(_trie) if _trie is not None else 0,
        }

    @application.post("/solve")
    async def solve(request: Request):
        from boggle_solver.solver import solve as solve_board

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        body = await _json_body(request)
        if "board" not in body:
            raise HTTPException(400, "Missing 'board' field")

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                board = Board(body["board"])
            except (TypeError, ValueError) as e:
                raise HTTPException(400, f"Invalid board: {e}")
            cells = board.rows() * board.cols()
            if cells > settings.MAX_BOARD_CELLS:
                raise HTTPException(413, f"Board too large ({cells} cells, max {settings.MAX_BOARD_CELLS})")

        logger.info("Board %dx%d: %s", board.rows(), board.cols(),
                    " / ".join(" ".join(row) for row in board.to_lists()))

        with timer.stage("solve"):
            all_words = solve_board(board, _trie)

        with timer.stage("score"):
            score = total_score(all_words)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words, score %d (returning %d)", len(all_words), score, len(words))

        if settings.DEBUG:
            _save_debug_artifacts(board, all_words, score, timer)

        return JSONResponse({
            "rows": board.rows(),
            "cols": board.cols(),
            "board": board.to_lists(),
            "words": words,
            "word_count": len(all_words),
            "score": score,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.post("/score")
    async def score(request: Request):
        body = await _json_body(request)
        words = body.get("words")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise HTTPException(400, "'words' must be a list of strings")
        scores = {w: score_of(w) for w in words}
        return JSONResponse({"scores": scores, "total": sum(scores.values())})

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle_solver.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle_solver.settings import update_settings, get_editable_settings
        body = await _json_body(request)
        errors = update_settings(settings, **body)
        logger.setLevel(settings.LOG_LEVEL.upper())
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def _save_debug_artifacts(board, words, score, timer):
    import json
    from datetime import datetime

    debug_dir = settings.DEBUG_DIR
    debug_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

    result = {
        "timestamp": ts,
        "rows": board.rows(),
        "cols": board.cols(),
        "board": board.to_lists(),
        "word_count": len(words),
        "words": words,
        "score": score,
        "timings": timer.summary(),
    }
    with open(debug_dir / f"{ts}_result.json", "w") as f:
        json.dump(result, f, indent=2)

    logger.info("Saved debug artifacts to %s/%s_*", debug_dir, ts)


app = create_app()
