import logging
import os

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import FileResponse, Response

import config
from models.remark import ParsedRemark, RemarkRequest
from processors.remark_processor import RemarkProcessor
from statement_io import StatementFileError, UnsupportedFileType, process_statement

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Transaction Remark Extractor")

processor = RemarkProcessor()

MEDIA_TYPES = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


@app.get("/")
def index():
    index_path = os.path.join(config.PUBLIC_DIR, "index.html")
    if not os.path.isfile(index_path):
        raise HTTPException(status_code=404, detail="index.html not found")
    return FileResponse(index_path)


@app.post("/upload")
async def upload(file: UploadFile = File(...)):
    """
    Upload a .csv or .xlsx statement. Returns the same table with
    Name, Transaction ID and Bank columns added.
    """
    content = await file.read()
    if len(content) > config.MAX_UPLOAD_BYTES:
        logger.warning("rejected %s: %d bytes exceeds limit", file.filename, len(content))
        raise HTTPException(status_code=413, detail="file too large")
    try:
        output, file_type = process_statement(content, file.filename, processor)
    except UnsupportedFileType as e:
        logger.warning("rejected %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))
    except StatementFileError as e:
        logger.exception("failed to process %s", file.filename)
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=output,
        media_type=MEDIA_TYPES[file_type],
        headers={"Content-Disposition": f'attachment; filename="processed.{file_type}"'},
    )


@app.post("/parse", response_model=ParsedRemark)
def parse(request: RemarkRequest):
    """Parse a single remark and return name, transactionId and bank."""
    return processor.compose(request.remark)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
