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

import dataclasses
from enum import Enum


class EventCategory(str, Enum):
    """
    Category of an event type, used to subscribe to a group of related events
    """

    ACCESS = "Access"
    PORTAL = "Portal"
    NETWORK = "Network"
    AUTHENTICATION = "Authentication"
    EVENT = "Event"
    ALARM = "Alarm"
    ELEVATOR = "Elevator"
    THREAT = "Threat"
    INTRUSION = "Intrusion"
    SYSTEM = "System"
    BACKUP = "Backup"


@dataclasses.dataclass(frozen=True)
class TagName:
    xml_name: str
    supports_filter: bool
    description: str


class EventTag(Enum):
    """
    The fields of an event that can be requested in an event stream. Only some of them support filtering.
    """

    AC_NAME = TagName("ACNAME", True, "Access Card Hot Stamp")
    AC_NUM = TagName("ACNUM", True, "Access Card Encoded Number")
    ACTIVITY_ID = TagName("ACTIVITYID", False, "Internal identifier for the activity")
    ALARM_ID = TagName("ALARMID", False, "Internal identifier for the alarm")
    ALARM_PANEL_NAME = TagName("ALARMPANELNAME", True, "Configured name of the alarm panel")
    ALARM_STATE_NAME = TagName("ALARMSTATENAME", True, "Internal name for alarm state (Active/Escalated)")
    ALARM_TIMER_NAME = TagName("ALARMTIMERNAME", True, "Internal timer name for alarm state changes")
    ALARM_TRANSITION_NAME = TagName("ALARMTRANSITIONNAME", True, "Internal name for alarm transition")
    BLADE_SLOT = TagName("BLADESLOT", True, "Slot number of node blade")
    NODE_ADDRESS = TagName("NODEADDRESS", True, "IP address of the node")
    NODE_NAME = TagName("NODENAME", True, "Configured name for the node")
    NODE_UNIQUE = TagName("NODEUNIQUE", False, "Unique identifier for the node")
    NDT = TagName("NDT", False, "Node date/time")
    CDT = TagName("CDT", False, "Controller date/time")
    DESC_NAME = TagName("DESCNAME", True, "General description of the activity")
    DETAIL = TagName("DETAIL", True, "Additional text detail about activity")
    EVENT_ID = TagName("EVENTID", False, "Internal identifier for the event")
    EVENT_NAME = TagName("EVTNAME", True, "Configured name of the event")
    EVENT_PRIORITY_NUMBER = TagName("EVTPRIO", False, "Configured priority number")
    IPANEL_AREA = TagName("IPANELAREA", True, "Intrusion panel area")
    IPANEL_NAME = TagName("IPANELNAME", True, "Intrusion panel name")
    IPANEL_OUTPUT = TagName("IPANELOUTPUT", True, "Intrusion panel output")
    IPANEL_USER = TagName("IPANELUSER", True, "Intrusion panel user")
    IPANEL_ZONE = TagName("IPANELZONE", True, "Intrusion panel zone")
    LOCATION_KEY = TagName("LOCATIONKEY", False, "Internal identifier for location")
    LOCATION_NAME = TagName("LOCATIONNAME", True, "Configured location name")
    LOGIN_ADDRESS = TagName("LOGINADDRESS", True, "Host from which user logged in")
    PARTITION_KEY = TagName("PARTITIONKEY", False, "Internal identifier for partition")
    PARTITION_NAME = TagName("PARTNAME", True, "Partition name")
    PERSON_ID = TagName("PERSONID", False, "Configured person identifier")
    PERSON_NAME = TagName("PERSONNAME", True, "Configured person name")
    PORTAL_KEY = TagName("PORTALKEY", False, "Internal identifier for portal")
    PORTAL_NAME = TagName("PORTALNAME", True, "Configured name of the portal")
    READER_NAME = TagName("RDRNAME", True, "Configured name of card reader")
    READER_KEY = TagName("READERKEY", False, "Internal identifier for reader")
    READER2_KEY = TagName("READER2KEY", False, "Internal identifier for second reader")
    LEVEL_KEY = TagName("LEVELKEY", False, "Internal identifier for threat level")
    THREAT_NAME = TagName("THREATNAME", True, "Name of the threat level")
    UC_BIT_LENGTH = TagName("UCBITLENGTH", False, "Number of bits in card format")

    @property
    def xml_name(self) -> str:
        return self.value.xml_name

    @property
    def supports_filter(self) -> bool:
        return self.value.supports_filter

    @property
    def description(self) -> str:
        return self.value.description


@dataclasses.dataclass(frozen=True)
class EventType:
    """
    :param desc_name: The value of the DESCNAME field of events of this type.
    :param category: The category of this type.
    :param required_fields: The fields that have to be requested to receive the full events of this type.
    """

    desc_name: str
    category: EventCategory
    required_fields: tuple[EventTag, ...]


class EventTypes(Enum):
    """
    All event types, in the order of the NetBox documentation
    """

    ACCESS_GRANTED = EventType(
        "Access Granted",
        EventCategory.ACCESS,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.READER_NAME,
            EventTag.READER_KEY,
            EventTag.READER2_KEY,
            EventTag.AC_NAME,
            EventTag.AC_NUM,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ACCESS_DENIED = EventType(
        "Access Denied",
        EventCategory.ACCESS,
        (
            EventTag.DETAIL,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.READER_KEY,
            EventTag.READER2_KEY,
            EventTag.READER_NAME,
            EventTag.AC_NAME,
            EventTag.AC_NUM,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INVALID_ACCESS = EventType(
        "Invalid Access",
        EventCategory.ACCESS,
        (
            EventTag.DETAIL,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.READER_KEY,
            EventTag.READER2_KEY,
            EventTag.READER_NAME,
            EventTag.AC_NAME,
            EventTag.AC_NUM,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PORTAL_HELD_OPEN = EventType(
        "Portal Held Open",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PORTAL_FORCED_OPEN = EventType(
        "Portal Forced Open",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PORTAL_RESTORED = EventType(
        "Portal Restored",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_CONTROLLER_STARTUP = EventType(
        "Network Controller Startup",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_STARTUP = EventType(
        "Network Node Startup",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_CONTROLLER_SHUTDOWN = EventType(
        "Network Controller Shutdown",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    MOMENTARY_UNLOCK = EventType(
        "Momentary Unlock",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    UNLOCK = EventType(
        "Unlock",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    RELOCK = EventType(
        "Relock",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PORTAL_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_TIMEOUT = EventType(
        "Network Node Timeout",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_RESTORED = EventType(
        "Network Node Restored",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_DISCONNECT = EventType(
        "Network Node Disconnect",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_BAD_CONFIGURATION = EventType(
        "Network Node Bad Configuration",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_CONNECTED = EventType(
        "Network Node Connected",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_IDENTIFICATION = EventType(
        "Network Node Identification",
        EventCategory.NETWORK,
        (
            EventTag.DETAIL,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_DATA_DISCONNECT = EventType(
        "Network Node Data Disconnect",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LOG_ARCHIVE_SUCCESS = EventType(
        "Log Archive Success",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LOG_ARCHIVE_FAILURE = EventType(
        "Log Archive Failure",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LOGGED_IN = EventType(
        "Logged In",
        EventCategory.AUTHENTICATION,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.LOGIN_ADDRESS,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LOGGED_OUT = EventType(
        "Logged Out",
        EventCategory.AUTHENTICATION,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.LOGIN_ADDRESS,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LOGIN_FAILED = EventType(
        "Login Failed",
        EventCategory.AUTHENTICATION,
        (
            EventTag.DETAIL,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.LOGIN_ADDRESS,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    REQUEST_MOMENTARY_UNLOCK = EventType(
        "Request Momentary Unlock",
        EventCategory.PORTAL,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_NAME,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SESSION_EXPIRED = EventType(
        "Session Expired",
        EventCategory.AUTHENTICATION,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.LOGIN_ADDRESS,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_TRIGGERED = EventType(
        "Event Triggered",
        EventCategory.EVENT,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_NORMAL = EventType(
        "Event Normal",
        EventCategory.EVENT,
        (
            EventTag.ALARM_ID,
            EventTag.EVENT_ID,
            EventTag.EVENT_NAME,
            EventTag.EVENT_PRIORITY_NUMBER,
            EventTag.NDT,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_ACTIVATED = EventType(
        "Event Activated",
        EventCategory.EVENT,
        (
            EventTag.ALARM_ID,
            EventTag.EVENT_ID,
            EventTag.EVENT_NAME,
            EventTag.EVENT_PRIORITY_NUMBER,
            EventTag.NDT,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_TROUBLE = EventType(
        "Event Trouble",
        EventCategory.EVENT,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_TAMPER_ALARM = EventType(
        "Network Node Tamper Alarm",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_DHCP_FAILED = EventType(
        "Network Node DHCP Failed",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ELEVATOR_ACCESS_GRANTED = EventType(
        "Elevator Access Granted",
        EventCategory.ELEVATOR,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.READER_NAME,
            EventTag.UC_BIT_LENGTH,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ELEVATOR_ACCESS_DENIED = EventType(
        "Elevator Access Denied",
        EventCategory.ELEVATOR,
        (
            EventTag.DETAIL,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.READER_NAME,
            EventTag.UC_BIT_LENGTH,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    THREAT_LEVEL_SET = EventType(
        "Threat Level Set",
        EventCategory.THREAT,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.LEVEL_KEY,
            EventTag.LOCATION_KEY,
            EventTag.LOCATION_NAME,
            EventTag.THREAT_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    THREAT_LEVEL_SET_API = EventType(
        "Threat Level Set (API)",
        EventCategory.THREAT,
        (
            EventTag.LEVEL_KEY,
            EventTag.LOCATION_KEY,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    THREAT_LEVEL_SET_ALM = EventType(
        "Threat Level Set (ALM)",
        EventCategory.THREAT,
        (
            EventTag.LEVEL_KEY,
            EventTag.LOCATION_KEY,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    LICENSE_READ_FAILURE = EventType(
        "License Read Failure",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    FTP_BACKUP_COMPLETE = EventType(
        "FTP Backup Complete",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    FTP_BACKUP_FAILED = EventType(
        "FTP Backup Failed",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_ACTIONS_CLEARED = EventType(
        "Alarm Actions Cleared",
        EventCategory.ALARM,
        (
            EventTag.ALARM_ID,
            EventTag.EVENT_ID,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_ACKNOWLEDGED = EventType(
        "Alarm Acknowledged",
        EventCategory.ALARM,
        (
            EventTag.ALARM_ID,
            EventTag.EVENT_ID,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_ARM_REQUEST = EventType(
        "Alarm Panel Arm Request",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_DISARM_REQUEST = EventType(
        "Alarm Panel Disarm Request",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_ARMED = EventType(
        "Alarm Panel Armed",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_DISARMED = EventType(
        "Alarm Panel Disarmed",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_ARM_FAILURE = EventType(
        "Alarm Panel Arm Failure",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_DISARM_FAILURE = EventType(
        "Alarm Panel Disarm Failure",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ALARM_PANEL_ARM_INTERRUPTED = EventType(
        "Alarm Panel Arm Interrupted",
        EventCategory.ALARM,
        (
            EventTag.ALARM_PANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_BLADE_NOT_RESPONDING = EventType(
        "Network Node Blade Not Responding",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.BLADE_SLOT,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_BLADE_RESPONDING = EventType(
        "Network Node Blade Responding",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.BLADE_SLOT,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_COPROCESSOR_NOT_RESPONDING = EventType(
        "Network Node Coprocessor Not Responding",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_COPROCESSOR_RESPONDING = EventType(
        "Network Node Coprocessor Responding",
        EventCategory.NETWORK,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NAS_BACKUP_COMPLETE = EventType(
        "NAS Backup Complete",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NAS_BACKUP_FAILED = EventType(
        "NAS Backup Failed",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_ACKNOWLEDGED = EventType(
        "Event Acknowledged",
        EventCategory.EVENT,
        (
            EventTag.EVENT_ID,
            EventTag.EVENT_NAME,
            EventTag.EVENT_PRIORITY_NUMBER,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVENT_ACTIONS_CLEARED = EventType(
        "Event Actions Cleared",
        EventCategory.EVENT,
        (
            EventTag.EVENT_ID,
            EventTag.EVENT_NAME,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ACCESS_NOT_COMPLETED = EventType(
        "Access Not Completed",
        EventCategory.ACCESS,
        (
            EventTag.PORTAL_KEY,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_NAME,
            EventTag.READER_NAME,
            EventTag.READER_KEY,
            EventTag.READER2_KEY,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    DUTY_LOG_ENTRY = EventType(
        "Duty Log Entry",
        EventCategory.SYSTEM,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BATTERY_VOLTAGE_LOW = EventType(
        "Battery Voltage Low",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BATTERY_FAILED = EventType(
        "Battery Failed",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BATTERY_REPLACED = EventType(
        "Battery Replaced",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ACCESS_DENIED_RADIO_BUSY = EventType(
        "Access Denied Because Radio Busy",
        EventCategory.ACCESS,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_DISCOVERED = EventType(
        "Network Node Discovered",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_CONFIG_RELOADED = EventType(
        "Network Node Configuration and Card Info Reloaded",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_CONNECTED = EventType(
        "Intrusion Panel Connected",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_NOT_CONNECTED = EventType(
        "Intrusion Panel Not Connected",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_REQUEST_ARM_AREA = EventType(
        "Intrusion Panel Request Arm Area",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_REQUEST_DISARM_AREA = EventType(
        "Intrusion Panel Request Disarm Area",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_USER,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_REQUEST_BYPASS_ZONE = EventType(
        "Intrusion Panel Request Bypass Zone",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_USER,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_REQUEST_RESET_BYPASS = EventType(
        "Intrusion Panel Request Reset Bypass",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_USER,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_AREA_ARMED = EventType(
        "Intrusion Panel Area Armed",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_AREA_DISARMED = EventType(
        "Intrusion Panel Area Disarmed",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ALARM = EventType(
        "Intrusion Panel Alarm",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_RESTORED = EventType(
        "Intrusion Panel Restored",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_CONNECTION_RESTORED = EventType(
        "Intrusion Panel Connection Restored",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ZONE_BYPASSED = EventType(
        "Intrusion Panel Zone Bypassed",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ZONE_RESET = EventType(
        "Intrusion Panel Zone Reset",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_AREA_LATE_TO_ALARM = EventType(
        "Intrusion Panel Area Late to Alarm",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ZONE_TROUBLE = EventType(
        "Intrusion Panel Zone Trouble",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ZONE_FAULT = EventType(
        "Intrusion Panel Zone Fault",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_ZONE_RESTORED = EventType(
        "Intrusion Panel Zone Restored",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_ZONE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_REQUEST_TOGGLE_OUTPUT = EventType(
        "Intrusion Panel Request Toggle Output",
        EventCategory.INTRUSION,
        (
            EventTag.DETAIL,
            EventTag.IPANEL_AREA,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_OUTPUT,
            EventTag.IPANEL_USER,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_OUTPUT_TOGGLED = EventType(
        "Intrusion Panel Output Toggled",
        EventCategory.INTRUSION,
        (
            EventTag.DETAIL,
            EventTag.IPANEL_NAME,
            EventTag.IPANEL_OUTPUT,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_COMM_PATH_TROUBLE = EventType(
        "Intrusion Panel Communication Path Trouble",
        EventCategory.INTRUSION,
        (
            EventTag.DETAIL,
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTRUSION_PANEL_COMM_PATH_RESTORED = EventType(
        "Intrusion Panel Communication Path Restored",
        EventCategory.INTRUSION,
        (
            EventTag.IPANEL_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_BACKUP_STARTED = EventType(
        "System Backup Started",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_BACKUP_IN_PROGRESS = EventType(
        "System Backup In Progress",
        EventCategory.BACKUP,
        (
            EventTag.DETAIL,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_BACKUP_SUCCESSFUL = EventType(
        "System Backup Successful",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_BACKUP_FAILED = EventType(
        "System Backup Failed",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    VIDEO_EVENT = EventType(
        "Video Event",
        EventCategory.SYSTEM,
        (
            EventTag.DETAIL,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    CAUSE_INACTIVE = EventType(
        "Cause Inactive",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    KEYPAD_TIMED_UNLOCK_EXPIRED = EventType(
        "Keypad Timed Unlock Expired",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    TEMPORARY_CREDENTIAL_ISSUED = EventType(
        "Temporary Credential Issued",
        EventCategory.ACCESS,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    TEMPORARY_CREDENTIAL_RETURNED = EventType(
        "Temporary Credential Returned",
        EventCategory.ACCESS,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    REQUEST_PERSISTENT_UNLOCK = EventType(
        "Request Persistent Unlock",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_NAME,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    REQUEST_PERSISTENT_LOCK = EventType(
        "Request Persistent Lock",
        EventCategory.PORTAL,
        (
            EventTag.PORTAL_KEY,
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.PORTAL_NAME,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    REQUEST_DISABLE_PORTAL = EventType(
        "Request Disable Portal",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    REQUEST_ENABLE_PORTAL = EventType(
        "Request Enable Portal",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PORTAL_DISABLED = EventType(
        "Portal Disabled",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PORTAL_ENABLED = EventType(
        "Portal Enabled",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    KEYPAD_COMMAND_EXECUTED = EventType(
        "Keypad Command Executed",
        EventCategory.ACCESS,
        (
            EventTag.EVENT_ID,
            EventTag.EVENT_NAME,
            EventTag.READER_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_TAMPER_ALARM = EventType(
        "Reader Tamper Alarm",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_TAMPER_NORMAL = EventType(
        "Reader Tamper Normal",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_BATTERY_ALARM = EventType(
        "Reader Battery Alarm",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_BATTERY_NORMAL = EventType(
        "Reader Battery Normal",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BLADE_TAMPER_ALARM = EventType(
        "Blade Tamper Alarm",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BLADE_TAMPER_NORMAL = EventType(
        "Blade Tamper Normal",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    MANUAL_KEY_OVERRIDE = EventType(
        "Manual Key Override",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EVACUATION = EventType(
        "Evacuation",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    MUSTERING_FOR_EVACUATION = EventType(
        "Mustering For Evacuation",
        EventCategory.SYSTEM,
        (
            EventTag.LOGIN_ADDRESS,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_HEALTH = EventType(
        "System Health",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_COMMUNICATION_ALARM = EventType(
        "Reader Communication Alarm",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    READER_COMMUNICATION_NORMAL = EventType(
        "Reader Communication Normal",
        EventCategory.ALARM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    FTP_BACKUP_FAILED_CONFIGURED = EventType(
        "FTP Backup Failed: FTP is Configured and Enabled",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NAS_BACKUP_FAILED_CONFIGURED = EventType(
        "NAS Backup Failed: FTP is Configured and Enabled",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BACKUP_COPIED_TO_FTP = EventType(
        "Backup Successfully Copied to FTP Server",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    BACKUP_COPIED_TO_NAS = EventType(
        "Backup Successfully Copied to NAS Server",
        EventCategory.BACKUP,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ELEVATOR_FREE_ACCESS = EventType(
        "Elevator Free Access",
        EventCategory.ELEVATOR,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    ELEVATOR_ACCESS_NOT_COMPLETED = EventType(
        "Elevator Access Not Completed",
        EventCategory.ELEVATOR,
        (
            EventTag.PERSON_ID,
            EventTag.PERSON_NAME,
            EventTag.READER_NAME,
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EMERGENCY_CALL_ACTIVATED = EventType(
        "Emergency Call Activated for Elevator",
        EventCategory.ELEVATOR,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    EMERGENCY_CALL_RESTORED = EventType(
        "Emergency Call Restored for Elevator",
        EventCategory.ELEVATOR,
        (
            EventTag.NDT,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    PRIVACY_ENABLED = EventType(
        "Privacy Enabled",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    INTERIOR_PUSH_BUTTON = EventType(
        "Interior Push Button",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    DOOR_BOLTED = EventType(
        "Door Bolted",
        EventCategory.PORTAL,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_LICENSE_EXPIRES_60_DAYS = EventType(
        "System License Expires in 60 Days",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_LICENSE_EXPIRES_30_DAYS = EventType(
        "System License Expires in 30 Days",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_LICENSE_EXPIRED = EventType(
        "System License Expired",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    SYSTEM_LICENSE_EXPIRED_ACK = EventType(
        "System License Expired Acknowledged",
        EventCategory.SYSTEM,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_NOT_DETECTED = EventType(
        "Network Node System License Not Detected",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_NOT_DETECTED_21_DAYS = EventType(
        "Network Node System License Not Detected for 21 Days",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_NOT_DETECTED_30_DAYS = EventType(
        "Network Node System License Not Detected for 30 Days",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_REESTABLISHED = EventType(
        "Network Node System License Reestablished",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_WARNING_ACK = EventType(
        "Network Node System License Warning Acknowledged",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_LICENSE_ERROR_ACK = EventType(
        "Network Node System License Error Acknowledged",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_CONTROLLER_TAKEOVER = EventType(
        "Network Controller Takeover",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_CONTROLLER_PRIMARY = EventType(
        "Network Controller Configured As Primary",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_CONTROLLER_STANDBY = EventType(
        "Network Controller Configured As Standby",
        EventCategory.NETWORK,
        (
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_SECURE_CONFIG_ERROR = EventType(
        "Network Node Secure Configuration Error",
        EventCategory.NETWORK,
        (
            EventTag.DETAIL,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )
    NETWORK_NODE_SECURE_COMM_FAILED = EventType(
        "Network Node Secure Communication Failed",
        EventCategory.NETWORK,
        (
            EventTag.DETAIL,
            EventTag.NODE_ADDRESS,
            EventTag.NODE_NAME,
            EventTag.NODE_UNIQUE,
            EventTag.PARTITION_NAME,
            EventTag.PARTITION_KEY,
            EventTag.CDT,
        ),
    )

    @property
    def desc_name(self) -> str:
        return self.value.desc_name

    @property
    def category(self) -> EventCategory:
        return self.value.category

    @property
    def required_fields(self) -> tuple[EventTag, ...]:
        return self.value.required_fields

    @classmethod
    def in_category(cls, category: EventCategory) -> list["EventTypes"]:
        return [event_type for event_type in cls if event_type.category is category]
