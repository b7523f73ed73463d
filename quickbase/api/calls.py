"""
quickbase.api.calls - QuickBase XML API call names
===================================================
"""

from __future__ import annotations

from enum import Enum


class QuickBaseAPICall(str, Enum):
    """
    Operation tokens understood by the QuickBase HTTP API.

    The value is the wire name sent as ``act=`` (GET) or in the
    ``QUICKBASE-ACTION`` header (POST).

    Examples
    --------
    >>> str(QuickBaseAPICall.API_DoQuery)
    'API_DoQuery'
    """

    API_AddField = "API_AddField"
    API_AddRecord = "API_AddRecord"
    API_AddReplaceDBPage = "API_AddReplaceDBPage"
    API_AddUserToRole = "API_AddUserToRole"
    API_Authenticate = "API_Authenticate"
    API_ChangePermission = "API_ChangePermission"
    API_ChangeRecordOwner = "API_ChangeRecordOwner"
    API_ChangeUserRole = "API_ChangeUserRole"
    API_CloneDatabase = "API_CloneDatabase"
    API_CopyMasterDetail = "API_CopyMasterDetail"
    API_CreateDatabase = "API_CreateDatabase"
    API_CreateTable = "API_CreateTable"
    API_DeleteDatabase = "API_DeleteDatabase"
    API_DeleteField = "API_DeleteField"
    API_DeleteRecord = "API_DeleteRecord"
    API_DoQuery = "API_DoQuery"
    API_DoQueryCount = "API_DoQueryCount"
    API_EditRecord = "API_EditRecord"
    API_FieldAddChoices = "API_FieldAddChoices"
    API_FieldRemoveChoices = "API_FieldRemoveChoices"
    API_FindDBByName = "API_FindDBByName"
    API_GenAddRecordForm = "API_GenAddRecordForm"
    API_GenResultsTable = "API_GenResultsTable"
    API_GetAncestorInfo = "API_GetAncestorInfo"
    API_GetAppDTMInfo = "API_GetAppDTMInfo"
    API_GetDBInfo = "API_GetDBInfo"
    API_GetDBPage = "API_GetDBPage"
    API_GetDBVar = "API_GetDBVar"
    API_GetGroupRole = "API_GetGroupRole"
    API_GetNumRecords = "API_GetNumRecords"
    API_GetRecordAsHTML = "API_GetRecordAsHTML"
    API_GetRecordInfo = "API_GetRecordInfo"
    API_GetRoleInfo = "API_GetRoleInfo"
    API_GetSchema = "API_GetSchema"
    API_GetUserInfo = "API_GetUserInfo"
    API_GetUserRole = "API_GetUserRole"
    API_GetUsersInGroup = "API_GetUsersInGroup"
    API_GrantedDBs = "API_GrantedDBs"
    API_GrantedDBsForGroup = "API_GrantedDBsForGroup"
    API_ImportFromCSV = "API_ImportFromCSV"
    API_ListDBPages = "API_ListDBPages"
    API_ProvisionUser = "API_ProvisionUser"
    API_PurgeRecords = "API_PurgeRecords"
    API_RemoveUserFromRole = "API_RemoveUserFromRole"
    API_RenameApp = "API_RenameApp"
    API_RunImport = "API_RunImport"
    API_SendInvitation = "API_SendInvitation"
    API_SetDBVar = "API_SetDBVar"
    API_SetFieldProperties = "API_SetFieldProperties"
    API_SetKeyField = "API_SetKeyField"
    API_SignOut = "API_SignOut"
    API_UploadFile = "API_UploadFile"
    API_UserRoles = "API_UserRoles"

    def __str__(self) -> str:
        return self.value
