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

import datetime
import logging
from typing import Optional, Self

import pydantic
from dateutil.parser import ParserError

from rego import util
from rego.lenel_s2 import const
from rego.lenel_s2.command import Command
from rego.lenel_s2.model import XmlModel, xml_list
from rego.protocol.exceptions import PaginationError

LOGGER = logging.getLogger(__name__)


def _parse_token(token: str, command: Command) -> int:
    try:
        return int(token)
    except ValueError:
        raise PaginationError(f"Invalid continuation token {token!r}", command.name)


###########################################
# People
###########################################


class Vehicle(XmlModel):
    color: str = pydantic.Field("", alias="VEHICLECOLOR")
    make: str = pydantic.Field("", alias="VEHICLEMAKE")
    model: str = pydantic.Field("", alias="VEHICLEMODEL")
    state: str = pydantic.Field("", alias="VEHICLESTATE")
    license: str = pydantic.Field("", alias="VEHICLELICNUM")
    tag: str = pydantic.Field("", alias="VEHICLETAGNUM")


class AccessCard(XmlModel):
    """
    A credential assigned to a person.

    :param encoded_num: The data on the credential, interpreted with the rules of the card format.
    :param hot_stamp: Value stamped on the card, often the same as the encoded number.
    :param format: Name of the card format used to decode the credential.
    :param status: The status of the credential, ACTIVE when not set on creation.
    """

    encoded_num: str = pydantic.Field("", alias="ENCODEDNUM")
    hot_stamp: str = pydantic.Field("", alias="HOTSTAMP")
    format: str = pydantic.Field("", alias="CARDFORMAT")
    disabled: bool = pydantic.Field(False, alias="DISABLED")
    status: str = pydantic.Field("", alias="CARDSTATUS")
    expiration_date: str = pydantic.Field("", alias="CARDEXPDATE")


class Person(XmlModel):
    """
    A person record. Only the access levels and credentials currently assigned to the person are returned.
    """

    person_id: str = pydantic.Field("", alias="PERSONID")
    first_name: str = pydantic.Field("", alias="FIRSTNAME")
    middle_name: str = pydantic.Field("", alias="MIDDLENAME")
    last_name: str = pydantic.Field("", alias="LASTNAME")
    username: str = pydantic.Field("", alias="USERNAME")
    role: str = pydantic.Field("", alias="ROLE")
    # DB, LDAP or SSO
    auth_type: str = pydantic.Field("", alias="AUTHTYPE")
    partition: str = pydantic.Field("", alias="PARTITION")
    activation_date: str = pydantic.Field("", alias="ACTDATE")
    expiration_date: str = pydantic.Field("", alias="EXPDATE")
    udf1: str = pydantic.Field("", alias="UDF1")
    udf2: str = pydantic.Field("", alias="UDF2")
    udf3: str = pydantic.Field("", alias="UDF3")
    udf4: str = pydantic.Field("", alias="UDF4")
    udf5: str = pydantic.Field("", alias="UDF5")
    udf6: str = pydantic.Field("", alias="UDF6")
    udf7: str = pydantic.Field("", alias="UDF7")
    udf8: str = pydantic.Field("", alias="UDF8")
    udf9: str = pydantic.Field("", alias="UDF9")
    udf10: str = pydantic.Field("", alias="UDF10")
    udf11: str = pydantic.Field("", alias="UDF11")
    udf12: str = pydantic.Field("", alias="UDF12")
    udf13: str = pydantic.Field("", alias="UDF13")
    udf14: str = pydantic.Field("", alias="UDF14")
    udf15: str = pydantic.Field("", alias="UDF15")
    udf16: str = pydantic.Field("", alias="UDF16")
    udf17: str = pydantic.Field("", alias="UDF17")
    udf18: str = pydantic.Field("", alias="UDF18")
    udf19: str = pydantic.Field("", alias="UDF19")
    udf20: str = pydantic.Field("", alias="UDF20")
    pin: str = pydantic.Field("", alias="PIN")
    notes: str = pydantic.Field("", alias="NOTES")
    deleted: bool = pydantic.Field(False, alias="DELETED")
    picture_url: str = pydantic.Field("", alias="PICTUREURL")
    badge_layout: str = pydantic.Field("", alias="BADGELAYOUT")
    # Deprecated by the appliance in favour of last_edit
    last_modified: str = pydantic.Field("", alias="LASTMOD")
    last_edit: str = pydantic.Field("", alias="LASTEDIT")
    last_edit_person_id: str = pydantic.Field("", alias="LASTEDITPERSONID")
    phone: str = pydantic.Field("", alias="CONTACTPHONE")
    mobile: str = pydantic.Field("", alias="MOBILEPHONE")
    email: str = pydantic.Field("", alias="CONTACTEMAIL")
    sms_email: str = pydantic.Field("", alias="CONTACTSMSEMAIL")
    location: str = pydantic.Field("", alias="CONTACTLOCATION")
    other_name: str = pydantic.Field("", alias="OTHERCONTACTNAME")
    other_phone: str = pydantic.Field("", alias="OTHERCONTACTPHONE")
    vehicles: list[Vehicle] = xml_list("VEHICLES/VEHICLE")
    access_levels: list[str] = xml_list("ACCESSLEVELS/ACCESSLEVEL")
    access_cards: list[AccessCard] = xml_list("ACCESSCARDS/ACCESSCARD")


class People(XmlModel):
    """
    A page of person records, continued with the STARTFROMKEY parameter.
    """

    people: list[Person] = xml_list("PEOPLE/PERSON")
    next_key: str = pydantic.Field("", alias="NEXTKEY")

    def next_token(self) -> Optional[str]:
        if self.next_key in const.NO_MORE_PAGES:
            return None
        return self.next_key

    def merge(self, other: "People") -> Self:
        self.people.extend(other.people)
        self.next_key = other.next_key
        return self

    def next_command(self, command: Command, token: str) -> Command:
        return command.with_params(STARTFROMKEY=_parse_token(token, command))


###########################################
# User defined fields
###########################################


class UDF(XmlModel):
    key: str = pydantic.Field("", alias="UDFLISTKEY")
    name: str = pydantic.Field("", alias="NAME")
    description: str = pydantic.Field("", alias="DESCRIPTION")


class UDFLists(XmlModel):
    user_defined_fields: list[UDF] = xml_list("UDFLISTS/UDFLIST")


###########################################
# Access history
###########################################


class Access(XmlModel):
    """
    A single entry of the access log.

    :param type: Whether the access was valid or invalid.
    :param reason: The reason code of an invalid access.
    """

    log_id: str = pydantic.Field("", alias="LOGID")
    person_id: str = pydantic.Field("", alias="PERSONID")
    reader: str = pydantic.Field("", alias="READER")
    dttm: str = pydantic.Field("", alias="DTTM")
    node_dttm: str = pydantic.Field("", alias="NODEDTM")
    type: int = pydantic.Field(0, alias="TYPE")
    reason: int = pydantic.Field(0, alias="REASON")
    reader_key: str = pydantic.Field("", alias="READERKEY")
    portal_key: str = pydantic.Field("", alias="PORTALKEY")


class AccessHistory(XmlModel):
    """
    A page of the access log, continued with the AFTERLOGID parameter.
    """

    accesses: list[Access] = xml_list("ACCESSES/ACCESS")
    next_log_id: str = pydantic.Field("", alias="NEXTLOGID")

    def next_token(self) -> Optional[str]:
        if self.next_log_id in const.NO_MORE_PAGES:
            return None
        return self.next_log_id

    def merge(self, other: "AccessHistory") -> Self:
        self.accesses.extend(other.accesses)
        self.next_log_id = other.next_log_id
        return self

    def next_command(self, command: Command, token: str) -> Command:
        return command.with_params(AFTERLOGID=_parse_token(token, command))


class CardFormats(XmlModel):
    formats: list[str] = xml_list("CARDFORMATS/CARDFORMAT")


###########################################
# Events
###########################################


class Event(XmlModel):
    """
    A single event of the event stream. The fields that are present depend on the type of the event, a field that
    is None does not apply to the event.
    """

    activity_id: Optional[str] = pydantic.Field(None, alias="ACTIVITYID")
    alarm_id: Optional[str] = pydantic.Field(None, alias="ALARMID")
    alarm_panel_name: Optional[str] = pydantic.Field(None, alias="ALARMPANELNAME")
    alarm_state_name: Optional[str] = pydantic.Field(None, alias="ALARMSTATENAME")
    alarm_timer_name: Optional[str] = pydantic.Field(None, alias="ALARMTIMERNAME")
    alarm_transition_name: Optional[str] = pydantic.Field(None, alias="ALARMTRANSITIONNAME")
    # Hot stamp of the access card
    ac_name: Optional[str] = pydantic.Field(None, alias="ACNAME")
    # Encoded number of the access card
    ac_num: Optional[str] = pydantic.Field(None, alias="ACNUM")
    blade_slot: Optional[str] = pydantic.Field(None, alias="BLADESLOT")
    cdt: Optional[str] = pydantic.Field(None, alias="CDT")
    desc_name: Optional[str] = pydantic.Field(None, alias="DESCNAME")
    detail: Optional[str] = pydantic.Field(None, alias="DETAIL")
    event_id: Optional[str] = pydantic.Field(None, alias="EVENTID")
    event_name: Optional[str] = pydantic.Field(None, alias="EVTNAME")
    event_priority: Optional[str] = pydantic.Field(None, alias="EVTPRIO")
    ipanel_area: Optional[str] = pydantic.Field(None, alias="IPANELAREA")
    ipanel_name: Optional[str] = pydantic.Field(None, alias="IPANELNAME")
    ipanel_output: Optional[str] = pydantic.Field(None, alias="IPANELOUTPUT")
    ipanel_user: Optional[str] = pydantic.Field(None, alias="IPANELUSER")
    ipanel_zone: Optional[str] = pydantic.Field(None, alias="IPANELZONE")
    level_key: Optional[str] = pydantic.Field(None, alias="LEVELKEY")
    location_key: Optional[str] = pydantic.Field(None, alias="LOCATIONKEY")
    location_name: Optional[str] = pydantic.Field(None, alias="LOCATIONNAME")
    login_address: Optional[str] = pydantic.Field(None, alias="LOGINADDRESS")
    ndt: Optional[str] = pydantic.Field(None, alias="NDT")
    node_address: Optional[str] = pydantic.Field(None, alias="NODEADDRESS")
    node_name: Optional[str] = pydantic.Field(None, alias="NODENAME")
    node_unique: Optional[str] = pydantic.Field(None, alias="NODEUNIQUE")
    partition_key: Optional[str] = pydantic.Field(None, alias="PARTITIONKEY")
    partition_name: Optional[str] = pydantic.Field(None, alias="PARTNAME")
    person_id: Optional[str] = pydantic.Field(None, alias="PERSONID")
    person_name: Optional[str] = pydantic.Field(None, alias="PERSONNAME")
    portal_key: Optional[str] = pydantic.Field(None, alias="PORTALKEY")
    portal_name: Optional[str] = pydantic.Field(None, alias="PORTALNAME")
    reader_name: Optional[str] = pydantic.Field(None, alias="RDRNAME")
    reader_key: Optional[str] = pydantic.Field(None, alias="READERKEY")
    reader2_key: Optional[str] = pydantic.Field(None, alias="READER2KEY")
    threat_name: Optional[str] = pydantic.Field(None, alias="THREATNAME")
    uc_bit_length: Optional[str] = pydantic.Field(None, alias="UCBITLENGTH")

    def controller_time(self) -> Optional[datetime.datetime]:
        """
        The time the event happened according to the controller, None when it is absent or can not be parsed.
        """
        return _parse_time(self.cdt)

    def node_time(self) -> Optional[datetime.datetime]:
        """
        The time the event happened according to the node, None when it is absent or can not be parsed.
        """
        return _parse_time(self.ndt)


def _parse_time(value: Optional[str]) -> Optional[datetime.datetime]:
    if not value:
        return None
    try:
        return util.parse_timestamp(value)
    except (ParserError, ValueError, OverflowError):
        LOGGER.debug("Failed to parse timestamp %s", value)
        return None
