from clausescan.analysis.base import BaseContractAnalyzer
from clausescan.analysis.request import MIN_CONTRACT_TEXT_LENGTH, build_analysis_request
from clausescan.documents.dispatcher import FormatDispatcher
from clausescan.documents.file_loader import FileLoader
from clausescan.logging.logger import Log
from clausescan.processor.exceptions import PipelineStateError
from clausescan.processor.pipeline import PipelineContext, PipelineStep


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.document = await self._file_loader.load(context.path, context.mime_type)
        Log.info(f"Loaded {len(context.document.content)} bytes from {context.path}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, dispatcher: FormatDispatcher) -> None:
        self._dispatcher = dispatcher

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise PipelineStateError("PipelineContext.document must be set before extraction")
        context.document_text = await self._dispatcher.extract(context.document)
        Log.info(
            f"Extracted {len(context.document_text.text)} chars from "
            f"{context.document.file_name}"
        )
        return context


class GateTextStep(PipelineStep):
    def __init__(self, min_length: int = MIN_CONTRACT_TEXT_LENGTH) -> None:
        self._min_length = min_length

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.document_text is None:
            raise PipelineStateError(
                "PipelineContext.document_text must be set before gating"
            )
        context.analysis_request = build_analysis_request(
            context.document_text.text,
            contract_type=context.contract_type,
            user_role=context.user_role,
            jurisdiction=context.jurisdiction,
            min_length=self._min_length,
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseContractAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis_request is None:
            raise PipelineStateError(
                "PipelineContext.analysis_request must be set before analysis"
            )
        context.analysis = await self._analyzer.analyze(context.analysis_request)
        Log.info(
            f"Analyzed {context.path.name}: "
            f"{len(context.analysis.flagged_clauses)} clauses need attention"
        )
        return context
