import logging
from langgraph.graph import StateGraph, END
from .models import OrchestrationState, StoryRequest, StoryResponse, FramePayload
from .llm import generate_story_text
from .illustrator import illustrate
from .segmenter import segment, derive_title

logger = logging.getLogger(__name__)


class StoryGenerationError(RuntimeError):
    """The story text could not be produced; no partial story is returned."""

    def __init__(self, message: str, empty: bool = False):
        super().__init__(message)
        self.empty = empty


async def node_story_text(state: OrchestrationState) -> dict:
    req = state.request
    logger.info(f"Generating story in {req.language} with voice {req.voice_name} and style {req.animation_style}")
    try:
        text = await generate_story_text(req)
    except Exception as e:
        raise StoryGenerationError(f"Story text generation failed: {e}") from e
    return {"story_text": text}

async def node_frames(state: OrchestrationState) -> dict:
    frames = segment(state.story_text or "")
    if not frames:
        logger.error("Story text produced no frames")
        raise StoryGenerationError("Story generation returned no frames", empty=True)
    logger.info(f"Story split into {len(frames)} frames")
    return {"frames": frames}

async def node_illustrations(state: OrchestrationState) -> dict:
    req = state.request
    frames = [f.model_copy() for f in state.frames]
    outcomes = await illustrate(frames, req.animation_style, req.language)
    return {"frames": frames, "outcomes": outcomes}

async def node_assemble(state: OrchestrationState) -> dict:
    req = state.request
    story = StoryResponse(
        title=derive_title(state.frames),
        frames=[FramePayload(id=f.index + 1, text=f.text, image_url=f.image_url) for f in state.frames],
        language=req.language,
        tts_voice_name=req.voice_name,
        animation_style=req.animation_style,
    )
    return {"story": story}

def build_graph():
    g = StateGraph(OrchestrationState)
    g.add_node("write_story", node_story_text)
    g.add_node("split_frames", node_frames)
    g.add_node("illustrate_frames", node_illustrations)
    g.add_node("assemble_story", node_assemble)
    g.set_entry_point("write_story")
    g.add_edge("write_story", "split_frames")
    g.add_edge("split_frames", "illustrate_frames")
    g.add_edge("illustrate_frames", "assemble_story")
    g.add_edge("assemble_story", END)
    return g.compile()

GRAPH = build_graph()

async def run_pipeline(req: StoryRequest) -> StoryResponse:
    state = OrchestrationState(request=req)
    logger.info(f"Starting story pipeline (prompt length: {len(req.prompt)} characters)")
    try:
        final_state = await GRAPH.ainvoke(state)
    except StoryGenerationError:
        raise
    except Exception as e:
        logger.exception(f"Story pipeline failed: {e}")
        raise StoryGenerationError(f"Story pipeline failed: {e}") from e

    # LangGraph returns a dict-like of channel values
    story = final_state.get("story") if hasattr(final_state, "get") else final_state.story
    if isinstance(story, dict):
        story = StoryResponse.model_validate(story)
    logger.info(f"Story pipeline completed: '{story.title}' with {len(story.frames)} frames")
    return story
