"""
    Copyright 2025 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""


class NetboxCommands:
    """
    Names of the commands of the NetBox API, grouped the way the API documentation groups them.
    """

    class Actions:
        ACTIVATE_OUTPUT = "Activate Output"
        DEACTIVATE_OUTPUT = "Deactivate Output"
        DOG_ON_NEXT_EXIT_PORTAL = "DogOnNextExitPortal"
        LOCK_PORTAL = "LockPortal"
        MOMENTARY_UNLOCK_PORTAL = "MomentaryUnlockPortal"
        SET_THREAT_LEVEL = "SetThreatLevel"
        UNLOCK_PORTAL = "UnlockPortal"

    class Configuration:
        ADD_ACCESS_LEVEL = "AddAccessLevel"
        ADD_ACCESS_LEVEL_GROUP = "AddAccessLevelGroup"
        ADD_HOLIDAY = "AddHoliday"
        ADD_PARTITION = "AddPartition"
        ADD_PORTAL_GROUP = "AddPortalGroup"
        ADD_READER_GROUP = "AddReaderGroup"
        ADD_TIME_SPEC = "AddTimeSpec"
        ADD_TIME_SPEC_GROUP = "AddTimeSpecGroup"
        ADD_THREAT_LEVEL = "AddThreatLevel"
        ADD_THREAT_LEVEL_GROUP = "AddThreatLevelGroup"
        DELETE_ACCESS_LEVEL = "DeleteAccessLevel"
        DELETE_ACCESS_LEVEL_GROUP = "DeleteAccessLevelGroup"
        DELETE_HOLIDAY = "DeleteHoliday"
        DELETE_PORTAL_GROUP = "DeletePortalGroup"
        DELETE_READER_GROUP = "DeleteReaderGroup"
        DELETE_TIME_SPEC = "DeleteTimeSpec"
        GET_ACCESS_LEVEL = "GetAccessLevel"
        GET_ACCESS_LEVELS = "GetAccessLevels"
        GET_ACCESS_LEVEL_GROUP = "GetAccessLevelGroup"
        GET_ACCESS_LEVEL_GROUPS = "GetAccessLevelGroups"
        GET_ACCESS_LEVEL_NAMES = "GetAccessLevelNames"
        GET_CARD_FORMATS = "GetCardFormats"
        GET_ELEVATORS = "GetElevators"
        GET_FLOORS = "GetFloors"
        GET_HOLIDAY = "GetHoliday"
        GET_HOLIDAYS = "GetHolidays"
        GET_OUTPUTS = "GetOutputs"
        GET_PARTITIONS = "GetPartitions"
        GET_PORTAL_GROUP = "GetPortalGroup"
        GET_PORTAL_GROUPS = "GetPortalGroups"
        GET_READER_GROUP = "GetReaderGroup"
        GET_READER_GROUPS = "GetReaderGroups"
        GET_READERS = "GetReaders"
        GET_TIME_SPEC_GROUP = "GetTimeSpecGroup"
        GET_TIME_SPEC_GROUPS = "GetTimeSpecGroups"
        GET_TIME_SPECS = "GetTimeSpecs"
        GET_UDF_LISTS = "GetUDFLists"
        GET_UDF_LIST_ITEMS = "GetUDFListItems"
        MODIFY_ACCESS_LEVEL_GROUP = "ModifyAccessLevelGroup"
        MODIFY_HOLIDAY = "ModifyHoliday"
        MODIFY_PORTAL_GROUP = "ModifyPortalGroup"
        MODIFY_READER_GROUP = "ModifyReaderGroup"
        MODIFY_THREAT_LEVEL = "ModifyThreatLevel"
        MODIFY_THREAT_LEVEL_GROUP = "ModifyThreatLevelGroup"
        MODIFY_TIME_SPEC = "ModifyTimeSpec"
        MODIFY_TIME_SPEC_GROUP = "ModifyTimeSpecGroup"
        MODIFY_UDF_LIST_ITEMS = "ModifyUDFListItems"
        REMOVE_THREAT_LEVEL = "RemoveThreatLevel"
        REMOVE_THREAT_LEVEL_GROUP = "RemoveThreatLevelGroup"
        SET_THREAT_LEVEL = "SetThreatLevel"

    class Events:
        LIST_EVENTS = "ListEvents"
        STREAM_EVENTS = "StreamEvents"
        TRIGGER_EVENT = "TriggerEvent"

    class History:
        GET_ACCESS_HISTORY = "GetAccessHistory"
        GET_EVENT_HISTORY = "GetEventHistory"
        GET_CARD_ACCESS_DETAILS = "GetCardAccessDetails"

    class People:
        ADD_ACCESS_LEVEL_GROUP = "AddAccessLevelGroup"
        ADD_CREDENTIAL = "AddCredential"
        ADD_PERSON = "AddPerson"
        GET_ACCESS_LEVEL_NAMES = "GetAccessLevelNames"
        GET_PERSON = "GetPerson"
        GET_PICTURE = "GetPicture"
        MODIFY_ACCESS_LEVEL = "ModifyAccessLevel"
        MODIFY_CREDENTIAL = "ModifyCredential"
        MODIFY_PERSON = "ModifyPerson"
        REMOVE_CREDENTIAL = "RemoveCredential"
        REMOVE_PERSON = "RemovePerson"
        SEARCH_PERSON_DATA = "SearchPersonData"

    class Portals:
        ADD_PORTAL_GROUP = "AddPortalGroup"
        ADD_READER_GROUP = "AddReaderGroup"
        DELETE_PORTAL_GROUP = "DeletePortalGroup"
        DELETE_READER_GROUP = "DeleteReaderGroup"
        GET_PORTAL_GROUP = "GetPortalGroup"
        GET_PORTAL_GROUPS = "GetPortalGroups"
        GET_READER = "GetReader"
        GET_READERS = "GetReaders"
        GET_READER_GROUP = "GetReaderGroup"
        GET_READER_GROUPS = "GetReaderGroups"
        MODIFY_PORTAL_GROUP = "ModifyPortalGroup"
        MODIFY_READER_GROUP = "ModifyReaderGroup"

    class ThreatLevels:
        ADD_THREAT_LEVEL = "AddThreatLevel"
        ADD_THREAT_LEVEL_GROUP = "AddThreatLevelGroup"
        MODIFY_THREAT_LEVEL = "ModifyThreatLevel"
        MODIFY_THREAT_LEVEL_GROUP = "ModifyThreatLevelGroup"
        SET_THREAT_LEVEL = "SetThreatLevel"

    class Utility:
        GET_API_VERSION = "GetAPIVersion"
        GET_PARTITIONS = "GetPartitions"
        LOGIN = "Login"
        LOGOUT = "Logout"
        PING_APP = "PingApp"
        SWITCH_PARTITION = "SwitchPartition"
