"""Относительные пути эндпоинтов Cloud OCR SDK v2"""

PROCESS_IMAGE_URL = "v2/processImage"
SUBMIT_IMAGE_URL = "v2/submitImage"
PROCESS_DOCUMENT_URL = "v2/processDocument"
PROCESS_BUSINESS_CARD_URL = "v2/processBusinessCard"
PROCESS_TEXT_FIELD_URL = "v2/processTextField"
PROCESS_BARCODE_FIELD_URL = "v2/processBarcodeField"
PROCESS_CHECKMARK_FIELD_URL = "v2/processCheckmarkField"
PROCESS_FIELDS_URL = "v2/processFields"
PROCESS_MRZ_URL = "v2/processMRZ"
PROCESS_RECEIPT_URL = "v2/processReceipt"
GET_TASK_STATUS_URL = "v2/getTaskStatus"
DELETE_TASK_URL = "v2/deleteTask"
LIST_TASKS_URL = "v2/listTasks"
LIST_FINISHED_TASKS_URL = "v2/listFinishedTasks"
GET_APPLICATION_INFO_URL = "v2/getApplicationInfo"
